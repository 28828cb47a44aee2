"""Pure configuration to display-tree projection for the link page."""

from .models import (
    AvatarView,
    CustomizationView,
    DisplayTree,
    LinkView,
    ProfileView,
    SocialLinkView,
)
from .projector import (
    css_variable_name,
    project,
    project_customization,
    project_links,
    project_profile,
    project_social,
)

__all__ = [
    "AvatarView",
    "CustomizationView",
    "DisplayTree",
    "LinkView",
    "ProfileView",
    "SocialLinkView",
    "css_variable_name",
    "project",
    "project_customization",
    "project_links",
    "project_profile",
    "project_social",
]
