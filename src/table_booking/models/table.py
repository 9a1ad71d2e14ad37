from dataclasses import dataclass


@dataclass
class Table:
    """Стол ресторана с фиксированным количеством мест."""

    id: int
    seats: int
    available: bool = True

    def fits(self, guest_count: int) -> bool:
        """Проверяет, что стол вмещает указанное количество гостей."""
        return self.seats >= guest_count
