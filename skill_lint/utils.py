from pathlib import Path


def compact_home_path(text: str | Path) -> str:
    """Shorten the user's home directory to ``~`` in a path or message."""
    value = str(text)
    home = str(Path.home())
    if value == home:
        return "~"
    return value.replace(f"{home}/", "~/")
