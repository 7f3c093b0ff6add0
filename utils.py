def mask_key(value: str, length: int = 4) -> str:
    """Shorten a secret for display in logs"""
    if not value:
        return ''
    if len(value) <= length * 2:
        return '*' * len(value)
    return f"{value[:length]}...{value[-length:]}"
