# pnutil/trace

import logging

from pnutil import env

__all__ = ["Tracer", "format_value"]


def format_value(value):
    if value is None:
        return "<null>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value[:16]
    if isinstance(value, float):
        return "%.18g" % value
    if isinstance(value, int):
        return "%d" % value
    return repr(value)


class Tracer:
    # Function entry/data/exit sink, passed explicitly to the calls it traces

    def __init__(self, logger=None, level=logging.DEBUG):
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level

    @classmethod
    def from_env(cls, name="PN_TRACE_UTIL", logger=None, environ=None):
        if env.env_bool(name, environ):
            return cls(logger)
        return None

    def enabled(self):
        return self.logger.isEnabledFor(self.level)

    def entry(self, name):
        if self.enabled():
            self.logger.log(self.level, "-> %s", name)

    def data(self, prefix, value):
        if self.enabled():
            self.logger.log(self.level, "%s %s", prefix, format_value(value))

    def exit(self, name, rc=''):
        if self.enabled():
            self.logger.log(self.level, "<- %s %s", name, format_value(rc))
        return rc
