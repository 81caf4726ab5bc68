"""
constants.py – single source of hard-coded names
"""

# Fixed API key expected by the remote service
APP_KEY = "NzNiMDhlYzQyNjJm"

# Identity header names
HDR_DEVICE_ID     = "deviceId"
HDR_CRM_ID        = "crmid"
HDR_USER_ID       = "userId"
HDR_SUBSCRIBER_ID = "subscriberId"
HDR_UNIQUE_ID     = "uniqueId"
HDR_APP_KEY       = "appkey"
HDR_CONTENT_TYPE  = "Content-Type"
HDR_USER_AGENT    = "User-Agent"

CONTENT_JSON = "application/json"
CONTENT_FORM = "application/x-www-form-urlencoded"

# Static device profile sent with every identity-bearing request
DEVICE_HEADERS = {
    "devicetype":  "phone",
    "os":          "android",
    "osVersion":   "13",
    "versionCode": "389",
    "isott":       "false",
    "languageId":  "6",
    "lbcookie":    "1",
    "usergroup":   "tvYR7NSNn7rymo3F",
}

# Store keys
KEY_DEVICE_ID           = "deviceId"
KEY_SSO_TOKEN           = "ssoToken"
KEY_CRM                 = "crm"
KEY_UNIQUE_ID           = "uniqueId"
KEY_ACCESS_TOKEN        = "accessToken"
KEY_REFRESH_TOKEN       = "refreshToken"
KEY_LAST_TOKEN_REFRESH  = "lastTokenRefreshTime"
KEY_LAST_SSO_REFRESH    = "lastSSOTokenRefreshTime"

DEVICE_ID_BYTES = 8     # → 16 hex chars
