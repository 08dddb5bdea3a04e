from typing import Dict, Any

def to_camel_case(name: str) -> str:
    """Convert a snake_case name to camelCase, keeping leading underscores."""
    stripped = name.lstrip('_')
    prefix = name[:len(name) - len(stripped)]
    parts = [p for p in stripped.split('_') if p]
    if not parts:
        return name
    return prefix + parts[0] + ''.join(p[:1].upper() + p[1:] for p in parts[1:])

def merge_dicts(dict1: Dict[str, Any], dict2: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries."""
    result = dict1.copy()
    
    for key, value in dict2.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
            
    return result
