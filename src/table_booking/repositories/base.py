from dataclasses import fields
from typing import Any, Callable, Generic, Iterable, Optional, Type, TypeVar

ModelT = TypeVar('ModelT')


class CRUDBase(Generic[ModelT]):
    """Базовый класс для CRUD операций над коллекцией в памяти."""

    def __init__(
        self,
        model: Type[ModelT],
        items: Iterable[ModelT] = (),
    ) -> None:
        """Инициализация класса."""
        self.model = model
        self._items: list[ModelT] = list(items)

    def get(
        self,
        *predicates: Callable[[ModelT], bool],
        many: bool = False,
        **filters: Any,
    ) -> list[ModelT] | Optional[ModelT]:
        """Универсальная выборка по равенствам полей модели.

        get(..., field=value, ...).

        Параметры:
            *predicates: произвольные условия (например, lambda t: t.available).
            many: True — вернуть список, False — вернуть первый или None.
            **filters: равенства по полям модели (field=value).

        Порядок результата совпадает с порядком добавления записей.

        Исключения:
            ValueError — если передан фильтр по несуществующему полю модели.
        """
        self._validate_filters(filters)
        matches = (
            obj
            for obj in self._items
            if all(getattr(obj, k) == v for k, v in filters.items())
            and all(predicate(obj) for predicate in predicates)
        )
        return list(matches) if many else next(matches, None)

    def get_multi(self) -> list[ModelT]:
        """Получение всех записей коллекции."""
        return list(self._items)

    def create(self, **obj_in_data: Any) -> ModelT:
        """Создание записи в коллекции."""
        db_obj = self.model(**obj_in_data)
        self._items.append(db_obj)
        return db_obj

    def update_obj(self, db_obj: ModelT, **update_data: Any) -> ModelT:
        """Обновление полей записи на месте."""
        self._validate_filters(update_data)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        return db_obj

    def delete(self, db_obj: ModelT) -> ModelT:
        """Удаление записи из коллекции."""
        self._items.remove(db_obj)
        return db_obj

    def _validate_filters(self, filters: dict[str, Any]) -> None:
        """Валидация имён полей, переданных в get() и update_obj()."""
        known = {field.name for field in fields(self.model)}
        unknown = [k for k in filters if k not in known]
        if unknown:
            raise ValueError(
                'Некорректные поля фильтра для '
                f'{self.model.__name__}: {unknown}',
            )
