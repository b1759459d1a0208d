import json
from os import path
from typing import Any, Optional, Union


def file_content(filepath: str) -> Union[str, None]:
    if filepath is not None and path.exists(filepath):
        with open(filepath, "r", encoding="utf-8-sig") as file:
            return file.read()
    return None


def file_content_raise_if_none(filepath: str) -> str:
    optional_file_content = file_content(filepath)
    if optional_file_content is None:
        raise ValueError(f"file_content for {filepath} shouldn't be None")
    return optional_file_content


def json_from_file(filepath: str) -> Any:
    return json.loads(file_content_raise_if_none(filepath))


def combine_uri(uri: Optional[str], path_to_add: str) -> str:
    """
    Joins a base uri and a path with a single slash. No other normalisation is
    done, so an already prefixed path is prefixed again.
    """
    if not uri:
        return path_to_add

    return uri + path_to_add if uri.endswith("/") else uri + "/" + path_to_add


def get_version_from_file(file_path: Optional[str] = None) -> str:
    _default_version = "v0.0.0"

    if file_path is None:
        return _default_version

    _version_dict = json_from_file(file_path)
    return _version_dict["version"] if "version" in _version_dict else _default_version
