"""Validation of placeholder values against their declared type.

Placeholders like ``{id:int}`` or ``{to:email}`` only match path segments
accepted by the validator registered for the type. Types without a
validator accept every value.
"""

import ipaddress
import re


_is_int = re.compile(r'[0-9]+').fullmatch

_local = r"[a-zA-Z0-9_%+-]+(?:\.[a-zA-Z0-9_%+-]+)*"
_label = r'[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?'
_is_email = re.compile(
    r'{local}@(?:{label}\.)+[a-zA-Z]{{2,}}'.format(
        local=_local, label=_label)).fullmatch


def is_int(value):
    return _is_int(value) is not None


def is_string(value):
    return True


def is_email(value):
    return _is_email(value) is not None


def is_ip(value):
    # scoped ipv6 addresses like fe80::1%eth0 are not accepted
    if '%' in value:
        return False

    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False

    return True


VALIDATORS = {
    'int': is_int,
    'string': is_string,
    'email': is_email,
    'ip': is_ip,
}


def validate(value, typ):
    """Return True if *value* is acceptable for placeholder type *typ*.

    ``None`` and unknown types accept anything.
    """
    validator = VALIDATORS.get(typ)
    if validator is None:
        return True

    return validator(value)
