# pnutil/url

from collections import namedtuple

__all__ = ["UrlComponents", "urldecode", "parse_url"]


UrlComponents = namedtuple("UrlComponents", ("scheme", "user", "password", "host", "port", "path"))

_unset = UrlComponents(None, None, None, None, None, None)


def _hexval(h):
    if 48 <= h <= 57:  return h - 48
    if 65 <= h <= 70:  return h - 55
    if 97 <= h <= 102: return h - 87
    return -1

def _strtoul16(esc):
    # Lenient like strtoul(esc, NULL, 16): no digits gives 0
    i = 0
    n = len(esc)
    while i < n and esc[i] in b' \t\n\v\f\r':
        i += 1
    neg = False
    if i < n and esc[i] in b'+-':
        neg = esc[i] == 45 # minus
        i += 1
    d = 0
    while i < n:
        v = _hexval(esc[i])
        if v < 0:
            break
        d = (d << 4) | v
        i += 1
    if neg:
        d = -d
    return d & 0xFF


def urldecode(s):
    if s is None or '%' not in s:
        return s
    
    bmv = memoryview(s.encode('utf-8', 'surrogateescape'))
    n = len(bmv)
    res = bytearray(n) # result is never longer than the input
    j = 0
    
    i = 0
    while (i < n):
        b = bmv[i]
        if b == 37 and i + 2 < n:
            # Found '%' with two characters after it
            res[j] = _strtoul16(bmv[i+1:i+3])
            i += 3
        else:
            res[j] = b
            i += 1
        j += 1
    
    return bytes(res[:j]).decode('utf-8', 'surrogateescape')


def parse_url(url, tracer=None):
    if tracer is not None:
        tracer.entry("parse_url")
        tracer.data("url", url)
    if not url:
        if tracer is not None:
            tracer.exit("parse_url", None)
        return _unset
    
    scheme = user = password = port = path = None
    
    slash = url.find('/')
    if slash > 0 and url.startswith('://', slash - 1):
        scheme = url[:slash-1]
        url = url[slash+2:]
        slash = url.find('/')
    
    if slash != -1:
        path = url[slash+1:]
        url = url[:slash]
    
    userinfo, sep, hostport = url.partition('@')
    if sep:
        user, sep, password = userinfo.partition(':')
        if not sep:
            password = None
        url = hostport
    
    host = url
    bracketed = False
    if url.startswith('['):
        # IPv6 literal, port scanning resumes after the closing bracket
        close = url.find(']')
        if close != -1:
            host = url[1:close]
            url = url[close+1:]
            bracketed = True
    
    colon = url.find(':')
    if colon != -1:
        port = url[colon+1:]
        if not bracketed:
            host = url[:colon]
    
    # Only the credentials are percent-decoded
    user = urldecode(user)
    password = urldecode(password)
    
    res = UrlComponents(scheme, user, password, host, port, path)
    if tracer is not None:
        tracer.exit("parse_url", res.host)
    return res
