class LJSweepError(Exception):
    pass


class MissingArgument(LJSweepError):
    pass


class InvalidNumber(LJSweepError):
    pass


class UnboundedSweep(LJSweepError):
    pass
