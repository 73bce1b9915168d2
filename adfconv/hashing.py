import hashlib


def calculate_task_list_id(item_ids: list[str]) -> str:
    """Generates a stable identifier for a task list from its items' identifiers."""
    hasher = hashlib.sha256()
    for item_id in item_ids:
        hasher.update(item_id.encode("utf-8"))
        hasher.update(b"|")
    return hasher.hexdigest()[:16]
