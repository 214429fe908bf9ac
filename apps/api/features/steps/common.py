import parse
from behave import register_type

@parse.with_pattern(r'\[.*\]')  # matches a list-like string
def _parse_list(s: str):
    """Convert comma separated string in brackets to list of strings."""
    # Remove surrounding brackets and split by comma
    s = s.strip()[1:-1]
    items = [item.strip() for item in s.split(",")]
    return [item for item in items if item]

register_type(List=_parse_list)

def split_object_ref(ref: str):
    bucket, key = ref.split("/", 1)
    return bucket, key
