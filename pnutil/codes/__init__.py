# pnutil/codes

__all__ = [
    "OK", "EOS", "ERR", "OVERFLOW", "UNDERFLOW", "STATE_ERR", "ARG_ERR",
    "TIMEOUT", "INTR", "INPROGRESS", "OUT_OF_MEMORY",
    "code", "Error", "Overflow",
]


OK = 0
EOS = -1
ERR = -2
OVERFLOW = -3
UNDERFLOW = -4
STATE_ERR = -5
ARG_ERR = -6
TIMEOUT = -7
INTR = -8
INPROGRESS = -9
OUT_OF_MEMORY = -10

_names = {
    OK: "<ok>",
    EOS: "PN_EOS",
    ERR: "PN_ERR",
    OVERFLOW: "PN_OVERFLOW",
    UNDERFLOW: "PN_UNDERFLOW",
    STATE_ERR: "PN_STATE_ERR",
    ARG_ERR: "PN_ARG_ERR",
    TIMEOUT: "PN_TIMEOUT",
    INTR: "PN_INTR",
    INPROGRESS: "PN_INPROGRESS",
    OUT_OF_MEMORY: "PN_OUT_OF_MEMORY",
}


def code(n):
    return _names.get(n, "<unknown>")


class Error(Exception):
    def __init__(self, code=ERR, text=None):
        if text is None:
            super().__init__(code)
        else:
            super().__init__(code, text)
        self.code = code
        self.text = text

    def __str__(self):
        if self.text is None:
            return code(self.code)
        return "%s: %s" % (code(self.code), self.text)


class Overflow(Error):
    def __init__(self, text=None):
        super().__init__(OVERFLOW, text)
