from typing import Iterator


def int_id_generator(start: int = 0) -> Iterator[int]:
    i = start
    while True:
        yield i
        i += 1
