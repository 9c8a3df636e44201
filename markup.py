import html as _html


def h(value) -> str:
    """HTML-escape a value for safe embedding in text or attributes."""
    if value is None:
        return ""
    return _html.escape(str(value), quote=True)


def data_attrs(**attrs) -> str:
    """Renders ``data-*`` attributes, skipping ``None`` values. ``report_id`` becomes ``data-report-id``."""
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        parts.append(f'data-{key.replace("_", "-")}="{h(value)}"')
    return " ".join(parts)
