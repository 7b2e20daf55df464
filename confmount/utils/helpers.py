def camel_to_snake(data):
    """
    Convert all keys in a dictionary from camelCase to snake_case.

    Args:
        data (dict): Input dictionary with camelCase keys

    Returns:
        dict: New dictionary with snake_case keys
    """

    def convert_key(key):
        result = ""
        for char in key:
            if char.isupper():
                result += "_" + char.lower()
            else:
                result += char
        return result

    if not isinstance(data, dict):
        return data

    return {
        convert_key(key): camel_to_snake(value) if isinstance(value, dict) else value
        for key, value in data.items()
    }
