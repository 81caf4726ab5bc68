"""
tvkit – support helpers for the streaming-service API client
-------------------------------------------------------------
Modules
-------
config.py       → loads `.env` once per process
logging.py      → JSON/stdout logger + nil-safe process-wide handle
constants.py    → header names, store keys, fixed API key
errors.py       → error types + `log_and_return_error`
http.py         → request executor, JSON builder, response decoder
headers.py      → identity headers required by the remote API
store.py        → redis-backed key/value store
batch.py        → batch set/delete against the store
files.py        → defensive local file reads
device.py       → persistent device id
credentials.py  → login state kept in the store
"""

__version__ = "0.1.0"
