"""Common literal values used across linkpage.

These constants keep default paths, glyphs, and the social platform table
centralized so the loader, projector, templates, and tests import the same
values without drifting. Intended for internal use within the linkpage
package.

Examples
--------
>>> from linkpage import _constants
>>> _constants.THEME_HREF_TEMPLATE.format(theme="technicallyweb3")
'./styles/technicallyweb3.css'
>>> list(_constants.SOCIAL_PLATFORMS)[:2]
['twitter', 'github']
"""

from __future__ import annotations

import types

DEFAULT_CONFIG_LOCATION = "content/data.json"
DEFAULT_OUTPUT = "public/index.html"
DEFAULT_THEME = "technicallyweb3"
THEME_HREF_TEMPLATE = "./styles/{theme}.css"

DEFAULT_LINK_ICON = "🔗"
LINK_DELAY_STEP_MS = 100
NEW_CONTEXT_TARGET = "_blank"
NEW_CONTEXT_REL = "noopener noreferrer"
FALLBACK_AVATAR_ALT = "Profile avatar"

# Insertion order is the display order of social links.
SOCIAL_PLATFORMS: types.MappingProxyType[str, tuple[str, str]] = (
    types.MappingProxyType(
        {
            "twitter": ("https://twitter.com/", "🐦"),
            "github": ("https://github.com/", "🐙"),
            "linkedin": ("https://linkedin.com/in/", "💼"),
            "youtube": ("https://youtube.com/@", "📺"),
            "discord": ("https://discord.gg/", "💬"),
            "instagram": ("https://instagram.com/", "📷"),
            "tiktok": ("https://tiktok.com/@", "🎵"),
            "twitch": ("https://twitch.tv/", "🎮"),
        }
    )
)
