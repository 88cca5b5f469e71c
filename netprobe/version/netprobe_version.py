from dataclasses import dataclass
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class Version:
    """
    Semantic version of netprobe plus its release date.
    """
    major: int
    minor: int
    patch: int
    released: date

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return the version with its release date."""
        return f"{self} ({self.date_string()})"

    def semver(self) -> Tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted release date."""
        return self.released.strftime(fmt)


NETPROBE_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    released=date(2026, 10, 19),
)
