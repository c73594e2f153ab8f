"""API versions and the small either-number-or-keyword values used in requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = [
    "ApiVersion",
    "DelayDaysOther",
    "DelayDays",
    "ScheduledOther",
    "Scheduled",
    "UpToOther",
    "UpTo",
    "OffSessionOther",
    "PaymentIntentOffSession",
]

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ApiVersion(StrEnum):
    """Released versions of the API, identified by their date."""

    V2011_01_01 = "2011-01-01"
    V2011_06_21 = "2011-06-21"
    V2011_06_28 = "2011-06-28"
    V2011_08_01 = "2011-08-01"
    V2011_09_15 = "2011-09-15"
    V2011_11_17 = "2011-11-17"
    V2012_02_23 = "2012-02-23"
    V2012_03_25 = "2012-03-25"
    V2012_06_18 = "2012-06-18"
    V2012_06_28 = "2012-06-28"
    V2012_07_09 = "2012-07-09"
    V2012_09_24 = "2012-09-24"
    V2012_10_26 = "2012-10-26"
    V2012_11_07 = "2012-11-07"
    V2013_02_11 = "2013-02-11"
    V2013_02_13 = "2013-02-13"
    V2013_07_05 = "2013-07-05"
    V2013_08_12 = "2013-08-12"
    V2013_08_13 = "2013-08-13"
    V2013_10_29 = "2013-10-29"
    V2013_12_03 = "2013-12-03"
    V2014_01_31 = "2014-01-31"
    V2014_03_13 = "2014-03-13"
    V2014_03_28 = "2014-03-28"
    V2014_05_19 = "2014-05-19"
    V2014_06_13 = "2014-06-13"
    V2014_06_17 = "2014-06-17"
    V2014_07_22 = "2014-07-22"
    V2014_07_26 = "2014-07-26"
    V2014_08_04 = "2014-08-04"
    V2014_08_20 = "2014-08-20"
    V2014_09_08 = "2014-09-08"
    V2014_10_07 = "2014-10-07"
    V2014_11_05 = "2014-11-05"
    V2014_11_20 = "2014-11-20"
    V2014_12_08 = "2014-12-08"
    V2014_12_17 = "2014-12-17"
    V2014_12_22 = "2014-12-22"
    V2015_01_11 = "2015-01-11"
    V2015_01_26 = "2015-01-26"
    V2015_02_10 = "2015-02-10"
    V2015_02_16 = "2015-02-16"
    V2015_02_18 = "2015-02-18"
    V2015_03_24 = "2015-03-24"
    V2015_04_07 = "2015-04-07"
    V2015_06_15 = "2015-06-15"
    V2015_07_07 = "2015-07-07"
    V2015_07_13 = "2015-07-13"
    V2015_07_28 = "2015-07-28"
    V2015_08_07 = "2015-08-07"
    V2015_08_19 = "2015-08-19"
    V2015_09_03 = "2015-09-03"
    V2015_09_08 = "2015-09-08"
    V2015_09_23 = "2015-09-23"
    V2015_10_01 = "2015-10-01"
    V2015_10_12 = "2015-10-12"
    V2015_10_16 = "2015-10-16"
    V2016_02_03 = "2016-02-03"
    V2016_02_19 = "2016-02-19"
    V2016_02_22 = "2016-02-22"
    V2016_02_23 = "2016-02-23"
    V2016_02_29 = "2016-02-29"
    V2016_03_07 = "2016-03-07"
    V2016_06_15 = "2016-06-15"
    V2016_07_06 = "2016-07-06"
    V2016_10_19 = "2016-10-19"
    V2017_01_27 = "2017-01-27"
    V2017_02_14 = "2017-02-14"
    V2017_04_06 = "2017-04-06"
    V2017_05_25 = "2017-05-25"
    V2017_06_05 = "2017-06-05"
    V2017_08_15 = "2017-08-15"
    V2017_12_14 = "2017-12-14"
    V2018_01_23 = "2018-01-23"
    V2018_02_05 = "2018-02-05"
    V2018_02_06 = "2018-02-06"
    V2018_02_28 = "2018-02-28"
    V2018_05_21 = "2018-05-21"
    V2018_07_27 = "2018-07-27"
    V2018_08_23 = "2018-08-23"
    V2018_09_06 = "2018-09-06"
    V2018_09_24 = "2018-09-24"
    V2018_10_31 = "2018-10-31"
    V2018_11_08 = "2018-11-08"
    V2019_02_11 = "2019-02-11"
    V2019_02_19 = "2019-02-19"
    V2019_03_14 = "2019-03-14"
    V2019_05_16 = "2019-05-16"
    V2019_08_14 = "2019-08-14"
    V2019_09_09 = "2019-09-09"
    V2020_08_27 = "2020-08-27"


def _require_int(value: Any, low: int, high: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{what} out of range: {value}")
    return value


class DelayDaysOther(StrEnum):
    """Keyword alternative to a number of delay days."""

    MINIMUM = "minimum"


@dataclass(frozen=True, slots=True)
class DelayDays:
    """Either a number of days or the keyword ``minimum``."""

    value: int | DelayDaysOther

    def __post_init__(self) -> None:
        if not isinstance(self.value, DelayDaysOther):
            _require_int(self.value, 0, _U32_MAX, "delay days")

    @classmethod
    def days(cls, n: int) -> DelayDays:
        """A delay of ``n`` days."""
        return cls(n)

    @classmethod
    def minimum(cls) -> DelayDays:
        """The shortest delay the account allows."""
        return cls(DelayDaysOther.MINIMUM)

    def to_json(self) -> int | str:
        """The wire form: a bare number or keyword."""
        if isinstance(self.value, DelayDaysOther):
            return self.value.value
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> DelayDays:
        """Read the wire form, raising ValueError on anything else."""
        if isinstance(data, str):
            try:
                return cls(DelayDaysOther(data))
            except ValueError:
                raise ValueError(f"invalid delay days: {data!r}") from None
        try:
            return cls(data)
        except TypeError:
            raise ValueError(f"invalid delay days: {data!r}") from None


class ScheduledOther(StrEnum):
    """Keyword alternative to a scheduled timestamp."""

    NOW = "now"


@dataclass(frozen=True, slots=True)
class Scheduled:
    """Either a Unix timestamp or the keyword ``now``."""

    value: int | ScheduledOther

    def __post_init__(self) -> None:
        if not isinstance(self.value, ScheduledOther):
            _require_int(self.value, _I64_MIN, _I64_MAX, "timestamp")

    @classmethod
    def at(cls, timestamp: int) -> Scheduled:
        """Scheduled at the given Unix timestamp."""
        return cls(timestamp)

    @classmethod
    def now(cls) -> Scheduled:
        """Scheduled immediately."""
        return cls(ScheduledOther.NOW)

    def to_json(self) -> int | str:
        """The wire form: a bare number or keyword."""
        if isinstance(self.value, ScheduledOther):
            return self.value.value
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> Scheduled:
        """Read the wire form, raising ValueError on anything else."""
        if isinstance(data, str):
            try:
                return cls(ScheduledOther(data))
            except ValueError:
                raise ValueError(f"invalid schedule: {data!r}") from None
        try:
            return cls(data)
        except TypeError:
            raise ValueError(f"invalid schedule: {data!r}") from None


class UpToOther(StrEnum):
    """Keyword alternative to an upper bound."""

    INF = "inf"


@dataclass(frozen=True, slots=True)
class UpTo:
    """Either an upper bound or the keyword ``inf``."""

    value: int | UpToOther

    def __post_init__(self) -> None:
        if not isinstance(self.value, UpToOther):
            _require_int(self.value, 0, _U64_MAX, "upper bound")

    @classmethod
    def max(cls, n: int) -> UpTo:
        """Bounded above by ``n``."""
        return cls(n)

    @classmethod
    def inf(cls) -> UpTo:
        """No upper bound."""
        return cls(UpToOther.INF)

    def to_json(self) -> int | str:
        """The wire form: a bare number or keyword."""
        if isinstance(self.value, UpToOther):
            return self.value.value
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> UpTo:
        """Read the wire form, raising ValueError on anything else."""
        if isinstance(data, str):
            try:
                return cls(UpToOther(data))
            except ValueError:
                raise ValueError(f"invalid upper bound: {data!r}") from None
        try:
            return cls(data)
        except TypeError:
            raise ValueError(f"invalid upper bound: {data!r}") from None


class OffSessionOther(StrEnum):
    """How often an off-session payment recurs."""

    ONE_OFF = "one_off"
    RECURRING = "recurring"


@dataclass(frozen=True, slots=True)
class PaymentIntentOffSession:
    """Either a plain flag or an off-session frequency."""

    value: bool | OffSessionOther

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bool, OffSessionOther)):
            raise TypeError(f"off-session value must be bool or OffSessionOther, got {self.value!r}")

    @classmethod
    def exists(cls, flag: bool) -> PaymentIntentOffSession:
        """A plain yes/no off-session flag."""
        return cls(flag)

    @classmethod
    def frequency(cls, other: OffSessionOther) -> PaymentIntentOffSession:
        """An off-session payment with the given frequency."""
        return cls(OffSessionOther(other))

    def to_json(self) -> bool | str:
        """The wire form: a bare boolean or keyword."""
        if isinstance(self.value, OffSessionOther):
            return self.value.value
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> PaymentIntentOffSession:
        """Read the wire form, raising ValueError on anything else."""
        if isinstance(data, bool):
            return cls(data)
        if isinstance(data, str):
            try:
                return cls(OffSessionOther(data))
            except ValueError:
                pass
        raise ValueError(f"invalid off-session value: {data!r}")