import re

import pytest

from tvkit.constants import KEY_DEVICE_ID
from tvkit.credentials import (
    Credentials,
    check_logged_in,
    clear_credentials,
    get_credentials,
    write_credentials,
)
from tvkit.device import generate_device_id, get_device_id
from tvkit.errors import ContextError


class TestDeviceId:
    def test_generate_format(self):
        assert re.fullmatch(r"[0-9a-f]{16}", generate_device_id())

    def test_generated_once_then_reused(self, fake_redis, store):
        first = get_device_id(store)
        assert fake_redis.data[KEY_DEVICE_ID] == first
        assert get_device_id(store) == first

    def test_existing_id_returned(self, store):
        store.set(KEY_DEVICE_ID, "abc")
        assert get_device_id(store) == "abc"


class TestCredentials:
    def test_write_and_read_back(self, store):
        creds = Credentials(sso_token="sso", crm="crm1", unique_id="u1", access_token="at")
        write_credentials(creds, store)
        assert get_credentials(store) == creds
        assert check_logged_in(store) is True

    def test_empty_fields_not_written(self, fake_redis, store):
        write_credentials(Credentials(crm="c"), store)
        assert fake_redis.data == {"crm": "c"}

    def test_clear_logs_out(self, store):
        write_credentials(Credentials(sso_token="s", refresh_token="r"), store)
        clear_credentials(store)
        assert get_credentials(store) == Credentials()
        assert check_logged_in(store) is False

    def test_write_failure_wrapped_with_context(self, fake_redis, store):
        fake_redis.fail_on.add(("set", "ssoToken"))
        with pytest.raises(ContextError) as ei:
            write_credentials(Credentials(sso_token="s", crm="c"), store)
        assert "failed to write credentials" in str(ei.value)
        # best effort: the other key still landed
        assert fake_redis.data == {"crm": "c"}

    def test_clear_failure_still_deletes_rest(self, fake_redis, store):
        write_credentials(Credentials(sso_token="s", crm="c"), store)
        fake_redis.fail_on.add(("delete", "ssoToken"))
        with pytest.raises(ContextError):
            clear_credentials(store)
        assert fake_redis.data == {"ssoToken": "s"}
