"""Common literal values used across platform_tabs.

These constants keep marker keywords, configuration paths, and the fixed icon
table centralized so the parser, renderer, config loader, and tests import the
same values without drifting. Intended for internal use within the
platform_tabs package.

Examples
--------
>>> from platform_tabs import _constants
>>> _constants.DEFAULT_PLATFORM
'Android'
>>> _constants.PLATFORM_ICONS["iOS"]
'fa-apple'
"""

DEFAULT_PLATFORM = "Android"
DEFAULT_PLATFORM_CONFIG_KEY = "pluginsConfig.platform-tabs.defaultPlatform"

PLATFORM_TAG = "platform"
LANGUAGE_TAG = "lang"

PLATFORM_ICONS: dict[str, str] = {
    "Android": "fa-android",
    "iOS": "fa-apple",
    "HarmonyOS": "fa-mobile",
}
DEFAULT_ICON = "fa-code"

ERROR_FRAGMENT = '<div class="platform-tabs-error">No platform blocks found</div>'

ASSET_FILES = ("platform-tabs.css", "platform-tabs.js")
