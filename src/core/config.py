"""
Configuration management from environment variables.

WEEK_POLICY      iso | us | custom (default: iso)
WEEK_FIRST_DAY   weekday name, custom policy only (e.g. 'monday')
WEEK_MIN_DAYS    1..7, custom policy only
WEEK_TIMEZONE    IANA zone name (default: UTC)
WEEK_LOG_LEVEL   logging level name (default: INFO)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.core.domain.week_policy import ISO_POLICY, US_POLICY, Weekday, WeekPolicy
from src.core.logger import set_log_level


_PRESETS = {
    "iso": ISO_POLICY,
    "us": US_POLICY,
}


@dataclass(frozen=True)
class WeekSettings:
    """Week numbering settings from environment variables."""

    policy_name: str = "iso"
    timezone: str = "UTC"
    log_level: str = "INFO"

    # Custom policy fields (must be set when policy_name == "custom")
    first_day: Optional[str] = None
    min_days: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeekSettings":
        """
        Create settings from environment variables.

        A .env file in the working directory is loaded first when reading
        the process environment.

        Args:
            environ: Explicit mapping to read instead of os.environ

        Raises:
            ValueError: If a variable has an invalid value
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        policy_name = environ.get("WEEK_POLICY", "iso").strip().lower()
        if policy_name not in (*_PRESETS, "custom"):
            raise ValueError(
                f"WEEK_POLICY must be one of iso, us, custom; got {policy_name!r}"
            )

        min_days_raw = environ.get("WEEK_MIN_DAYS")
        min_days = None
        if min_days_raw:
            try:
                min_days = int(min_days_raw)
            except ValueError as e:
                raise ValueError(f"WEEK_MIN_DAYS must be an integer; got {min_days_raw!r}") from e

        first_day = environ.get("WEEK_FIRST_DAY") or None

        if policy_name == "custom" and (first_day is None or min_days is None):
            raise ValueError("WEEK_POLICY=custom requires WEEK_FIRST_DAY and WEEK_MIN_DAYS")

        return cls(
            policy_name=policy_name,
            timezone=environ.get("WEEK_TIMEZONE", "UTC"),
            log_level=environ.get("WEEK_LOG_LEVEL", "INFO").upper(),
            first_day=first_day,
            min_days=min_days,
        )

    def policy(self) -> WeekPolicy:
        """
        Build the WeekPolicy described by these settings.

        Raises:
            ValueError: Unknown weekday name
            pydantic.ValidationError: min_days outside 1..7 or unknown time zone
        """
        if self.policy_name == "custom":
            return WeekPolicy(
                first_day_of_week=Weekday.from_name(self.first_day or ""),
                minimal_days_in_first_week=self.min_days,
                tz_name=self.timezone,
            )
        return _PRESETS[self.policy_name].with_zone(self.timezone)

    def apply_log_level(self, prefix: str = "src") -> None:
        """Apply log_level to all loggers of the package."""
        set_log_level(prefix, self.log_level)
