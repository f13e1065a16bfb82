"""
Resolver Module - Black Box Interface

Purpose: Pick and launch the settings screen for a capability request
Interface: IntentResolver.resolve(), resolve_all_files_access(), resolve_app_permissions()
Hidden: Candidate chains, fallback order, launch error capture

Works against any launcher and resolvability predicate - a real device,
a simulated one, or a test double.
"""

from .resolver import (
    ACTION_APP_PERMISSION_SETTINGS,
    ACTION_APPLICATION_DETAILS_SETTINGS,
    ACTION_MANAGE_ALL_FILES_ACCESS_PERMISSION,
    ACTION_MANAGE_APP_ALL_FILES_ACCESS_PERMISSION,
    ACTION_MANAGE_APP_PERMISSIONS,
    EXTRA_APP_PACKAGE,
    EXTRA_PACKAGE_NAME,
    FLAG_ACTIVITY_NEW_TASK,
    STANDARD_ACTIONS,
    VERSION_R,
    Capability,
    EnvironmentFacts,
    Failed,
    IntentResolver,
    LaunchErr,
    Launched,
    Launcher,
    LaunchOk,
    LaunchResult,
    NavigationTarget,
    Outcome,
    app_permission_candidates,
    error_message,
    package_uri,
)

__all__ = [
    "ACTION_APP_PERMISSION_SETTINGS",
    "ACTION_APPLICATION_DETAILS_SETTINGS",
    "ACTION_MANAGE_ALL_FILES_ACCESS_PERMISSION",
    "ACTION_MANAGE_APP_ALL_FILES_ACCESS_PERMISSION",
    "ACTION_MANAGE_APP_PERMISSIONS",
    "EXTRA_APP_PACKAGE",
    "EXTRA_PACKAGE_NAME",
    "FLAG_ACTIVITY_NEW_TASK",
    "STANDARD_ACTIONS",
    "VERSION_R",
    "Capability",
    "EnvironmentFacts",
    "Failed",
    "IntentResolver",
    "LaunchErr",
    "Launched",
    "Launcher",
    "LaunchOk",
    "LaunchResult",
    "NavigationTarget",
    "Outcome",
    "app_permission_candidates",
    "error_message",
    "package_uri",
]
