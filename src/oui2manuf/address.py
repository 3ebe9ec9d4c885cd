from __future__ import annotations


def normalize_mac(mac: str) -> str:
    # Normalize to uppercase colon-separated where possible
    m = mac.strip().replace("-", ":").upper()
    return m


def is_locally_administered(mac: str) -> bool:
    """
    True when the U/L bit (0x02) of the first octet is set, which is the
    case for randomized and otherwise locally assigned addresses.
    """
    first = normalize_mac(mac).split(":", 1)[0]
    try:
        return bool(int(first, 16) & 0b00000010)
    except ValueError:
        return False
