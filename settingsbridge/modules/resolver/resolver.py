"""
Intent Resolver for Settings Bridge.

Turns a logical capability request into a launch of one platform settings
screen. Each capability owns a fixed, ordered chain of navigation targets;
the resolver walks that chain and falls back to a generic screen that the
platform always ships.

Design Principles:
- Fixed order: candidates are never reordered at runtime
- Unconditional last resort: the final candidate skips the resolvability check
- Structured attempts: launch errors become LaunchResult values, not control flow
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Union

logger = logging.getLogger("settingsbridge.resolver")

# Platform version that introduced the per-app "all files access" screen
VERSION_R = 30

# Settings screen actions
ACTION_MANAGE_APP_ALL_FILES_ACCESS_PERMISSION = (
    "android.settings.MANAGE_APP_ALL_FILES_ACCESS_PERMISSION"
)
ACTION_MANAGE_ALL_FILES_ACCESS_PERMISSION = "android.settings.MANAGE_ALL_FILES_ACCESS_PERMISSION"
ACTION_APPLICATION_DETAILS_SETTINGS = "android.settings.APPLICATION_DETAILS_SETTINGS"
ACTION_APP_PERMISSION_SETTINGS = "android.settings.APP_PERMISSION_SETTINGS"
ACTION_MANAGE_APP_PERMISSIONS = "android.settings.MANAGE_APP_PERMISSIONS"

STANDARD_ACTIONS = (
    ACTION_MANAGE_APP_ALL_FILES_ACCESS_PERMISSION,
    ACTION_MANAGE_ALL_FILES_ACCESS_PERMISSION,
    ACTION_APPLICATION_DETAILS_SETTINGS,
    ACTION_APP_PERMISSION_SETTINGS,
    ACTION_MANAGE_APP_PERMISSIONS,
)

# Extra keys; vendors read one or the other
EXTRA_APP_PACKAGE = "android.provider.extra.APP_PACKAGE"
EXTRA_PACKAGE_NAME = "android.intent.extra.PACKAGE_NAME"

FLAG_ACTIVITY_NEW_TASK = 0x10000000


class Capability(str, Enum):
    """Logical settings screens a caller can ask for."""

    ALL_FILES_ACCESS = "AllFilesAccess"
    APP_PERMISSIONS = "AppPermissions"


@dataclass(frozen=True)
class NavigationTarget:
    """
    Immutable descriptor of one system screen to open.

    Extras are stored as a tuple of (key, value) pairs so the target stays
    hashable and keeps insertion order.
    """

    action: str
    data: Optional[str] = None
    extras: tuple = ()
    flags: int = FLAG_ACTIVITY_NEW_TASK

    @property
    def extras_dict(self) -> Dict[str, str]:
        return dict(self.extras)

    def describe(self) -> str:
        """Render the target the way platform error messages print intents."""
        parts = [f"act={self.action}"]
        if self.data:
            parts.append(f"dat={self.data}")
        if self.flags:
            parts.append(f"flg={hex(self.flags)}")
        if self.extras:
            parts.append("(has extras)")
        return "{ " + " ".join(parts) + " }"

    def to_dict(self) -> Dict[str, object]:
        return {
            "action": self.action,
            "data": self.data,
            "extras": self.extras_dict,
            "flags": self.flags,
        }


def package_uri(package_name: str) -> str:
    """Subject URI pointing a settings screen at one application."""
    return f"package:{package_name}"


@dataclass
class EnvironmentFacts:
    """Per-request view of the host environment."""

    platform_version: int
    package_name: str
    can_resolve: Callable[[NavigationTarget], bool]


@dataclass(frozen=True)
class LaunchOk:
    target: NavigationTarget


@dataclass(frozen=True)
class LaunchErr:
    target: NavigationTarget
    message: str


LaunchResult = Union[LaunchOk, LaunchErr]


@dataclass(frozen=True)
class Launched:
    """Terminal success: the target screen was shown."""

    target: NavigationTarget
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """Terminal failure with the underlying error text."""

    reason: str
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Launched, Failed]


class Launcher(Protocol):
    """Anything that can open a navigation target."""

    def launch(self, target: NavigationTarget) -> None:
        """Open the target or raise."""
        ...


def error_message(error: BaseException) -> str:
    """Error text for a failed launch, never empty."""
    return str(error) or type(error).__name__


class IntentResolver:
    """
    Resolves capabilities into launched settings screens.

    A resolver holds only its launcher; every call receives fresh
    EnvironmentFacts and keeps nothing between calls.
    """

    def __init__(self, launcher: Launcher):
        """
        Initialize intent resolver.

        Args:
            launcher: Host launch action (raises when a target can't be opened)
        """
        self.launcher = launcher

    def resolve(self, capability: Capability, facts: EnvironmentFacts) -> Outcome:
        """Dispatch to the operation for the requested capability."""
        try:
            capability = Capability(capability)
        except ValueError:
            raise ValueError(f"Unsupported capability: {capability}") from None

        if capability is Capability.ALL_FILES_ACCESS:
            return self.resolve_all_files_access(facts)
        return self.resolve_app_permissions(facts)

    def try_launch(self, target: NavigationTarget) -> LaunchResult:
        """
        Attempt a single launch.

        The only place launch errors are caught; they come back as LaunchErr
        carrying the error text.
        """
        logger.debug(f"Launching {target.describe()}")
        try:
            self.launcher.launch(target)
        except Exception as e:
            logger.warning(f"Launch of {target.action} failed: {error_message(e)}")
            return LaunchErr(target=target, message=error_message(e))
        return LaunchOk(target=target)

    def resolve_all_files_access(self, facts: EnvironmentFacts) -> Outcome:
        """
        Open the "all files access" screen.

        Args:
            facts: Platform version and caller identity

        Returns:
            Launched or Failed

        Logic:
        1. Per-app screen on R and later, application details before that
        2. On launch failure, the generic all-files screen with no subject
        3. The fallback's own failure is final
        """
        first = all_files_access_target(facts)
        result = self.try_launch(first)
        if isinstance(result, LaunchOk):
            return Launched(target=result.target)

        logger.info(f"Falling back to {ACTION_MANAGE_ALL_FILES_ACCESS_PERMISSION}")
        result = self.try_launch(NavigationTarget(ACTION_MANAGE_ALL_FILES_ACCESS_PERMISSION))
        if isinstance(result, LaunchOk):
            return Launched(target=result.target, attempts=2)
        return Failed(reason=result.message, attempts=2)

    def resolve_app_permissions(self, facts: EnvironmentFacts) -> Outcome:
        """
        Open the app's permission settings.

        Args:
            facts: Caller identity and the resolvability predicate

        Returns:
            Launched or Failed

        Logic:
        1. Launch the first candidate some handler claims, stop there
        2. If none is claimed, launch application details unchecked
        """
        for candidate in app_permission_candidates(facts.package_name):
            if not facts.can_resolve(candidate):
                logger.debug(f"No handler for {candidate.action}")
                continue
            return _outcome(self.try_launch(candidate))

        logger.info("No permission screen resolved, opening application details")
        return _outcome(self.try_launch(application_details_target(facts.package_name)))


def _outcome(result: LaunchResult) -> Outcome:
    if isinstance(result, LaunchOk):
        return Launched(target=result.target)
    return Failed(reason=result.message)


def application_details_target(package_name: str) -> NavigationTarget:
    return NavigationTarget(
        ACTION_APPLICATION_DETAILS_SETTINGS, data=package_uri(package_name)
    )


def all_files_access_target(facts: EnvironmentFacts) -> NavigationTarget:
    """First target tried for AllFilesAccess on this platform version."""
    if facts.platform_version >= VERSION_R:
        return NavigationTarget(
            ACTION_MANAGE_APP_ALL_FILES_ACCESS_PERMISSION,
            data=package_uri(facts.package_name),
        )
    return application_details_target(facts.package_name)


def app_permission_candidates(package_name: str) -> List[NavigationTarget]:
    """Ordered AppPermissions candidates, most specific first."""
    uri = package_uri(package_name)
    return [
        NavigationTarget(
            ACTION_APP_PERMISSION_SETTINGS,
            data=uri,
            extras=((EXTRA_APP_PACKAGE, package_name), (EXTRA_PACKAGE_NAME, package_name)),
        ),
        NavigationTarget(
            ACTION_MANAGE_APP_PERMISSIONS,
            data=uri,
            extras=((EXTRA_PACKAGE_NAME, package_name),),
        ),
        application_details_target(package_name),
    ]
