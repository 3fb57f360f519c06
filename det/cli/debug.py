_DEBUG_FLAG = False


def enable_debug() -> None:
    global _DEBUG_FLAG
    _DEBUG_FLAG = True


def disable_debug() -> None:
    global _DEBUG_FLAG
    _DEBUG_FLAG = False


def is_debug_enabled() -> bool:
    return _DEBUG_FLAG
