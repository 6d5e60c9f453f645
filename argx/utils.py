from typing import Iterable, Optional, Union


def asList(i: Optional[Union[str, Iterable[str]]]) -> list[str]:
    if i is None:
        return []
    if isinstance(i, str):
        return [i]
    return list(i)
