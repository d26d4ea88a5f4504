"""Message mappings for errors and responses."""

class Messages:
    """Centralized messages for errors and responses."""
    
    # Group messages
    GROUP = {
        "not_found": "Group not found.",
        "not_found_with_id": "Group not found with the given ID.",
        "not_found_with_slug": "Group not found with the given slug.",
        "identifier_required": "A group identifier is required.",
        "slug_exists": "Group with this slug already exists",
        "deleted": "Group deleted successfully",
    }

def get_message(category: str, key: str, **kwargs) -> str:
    """Get a message from the specified category and format it with kwargs."""
    category_messages = getattr(Messages, category.upper(), {})
    message = category_messages.get(key, f"Message not found: {category}.{key}")
    return message.format(**kwargs) if kwargs else message
