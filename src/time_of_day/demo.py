"""Demonstrate construction-time validation of :class:`Time`.

The first time is printed; the second is out of range and the resulting
``InvalidArgument`` is deliberately left unhandled.
"""

from src.time_of_day.time_value import Time
from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger


def main() -> None:
    """Build and print the valid demo time, then build the invalid one."""
    parameters = ParameterLoader()
    hour, minute = parameters["demo_valid_time"]
    Logger.debug(f"Building Time({hour}, {minute})")
    valid = Time(hour, minute)
    print(valid)
    hour, minute = parameters["demo_invalid_time"]
    Logger.debug(f"Building Time({hour}, {minute})")
    invalid = Time(hour, minute)  # raises InvalidArgument("Hour: 25")
    print(invalid)


if __name__ == "__main__":
    main()
