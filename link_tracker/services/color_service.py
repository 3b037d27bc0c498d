import random
from typing import Optional


class ColorService:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def random_hex(self) -> str:
        """Six lowercase hex digits, the form GitHub expects for label colors."""
        return '{:06x}'.format(self.rng.randint(0, 0xFFFFFF))


color_service = ColorService()
