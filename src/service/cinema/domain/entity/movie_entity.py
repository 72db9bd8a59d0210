from typing import Optional

import attrs


@attrs.define
class Movie:
    title: str
    director: str = ''
    duration_minutes: Optional[int] = None
    id: Optional[int] = None
