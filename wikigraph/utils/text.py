from urllib.parse import unquote


def subject_from_url(url: str) -> str:
    """Human readable article subject taken from the /wiki/ path segment"""
    if "/wiki/" not in url:
        return ""
    return unquote(url.split("/wiki/", 1)[1]).replace("_", " ")


def truncate_preview(text: str, length: int) -> str:
    """Cut text to ``length`` characters, marking the cut with an ellipsis"""
    if len(text) > length:
        return text[:length] + "..."
    return text
