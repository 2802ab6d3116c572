"""Errors raised while parsing cron expressions."""


class CronParseError(ValueError):
    """A cron line or one of its parts could not be parsed."""


class UnknownTimePart(CronParseError):
    def __init__(self, field_name: str, token: str):
        self.field_name = field_name
        self.token = token
        super().__init__(f"Unknown cron time part for {field_name}: {token}")


class InvalidRangeValue(CronParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid range value {token}")


class UnknownTimeRange(CronParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown time range value {token}")


class UnrecognizedLine(CronParseError):
    """Neither the standard nor the @shortcut grammar matched."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Not a cron entry: {text!r}")
