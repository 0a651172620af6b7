from typing import Tuple


def unpack_tags(tags: str | None) -> Tuple[Tuple[str, str], ...]:
    tags_unpacked: list[Tuple[str, str]] = []
    if tags:
        try:
            for tag in tags.split(";"):
                if not tag.strip():
                    continue
                key, value = tag.split("=")
                if not key.strip():
                    raise ValueError(tag)
                tags_unpacked.append((key.strip(), value.strip()))
        except ValueError:
            raise ValueError(
                "Tags must be in the format 'key1=value1;key2=value2', "
                f"but instead got {tags}"
            )
    return tuple(tags_unpacked)


def tags_as_map(tags_unpacked: Tuple[Tuple[str, str], ...]) -> dict[str, str]:
    return dict(tags_unpacked)
