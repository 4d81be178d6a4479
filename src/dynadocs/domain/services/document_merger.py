"""Default injection and update merging for document payloads."""

from typing import Any

from dynadocs.domain.entities import FieldDefinition


class DocumentMerger:
    """Shapes payloads before validation and persistence.

    Both operations are pure: inputs are never mutated.
    """

    @staticmethod
    def apply_defaults(data: dict[str, Any], fields: list[FieldDefinition]) -> dict[str, Any]:
        """Inject default values for fields missing from a payload.

        A key that is present is never overwritten, even when its value is
        None. Fields without a default (or with a None default) are skipped.

        Args:
            data: The document payload.
            fields: The collection's field definitions.

        Returns:
            A new payload with defaults applied.
        """
        result = dict(data)
        for field in fields:
            if field.name not in result and field.default_value is not None:
                result[field.name] = field.default_copy()
        return result

    @staticmethod
    def merge_for_update(existing: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
        """Apply partial updates on top of existing document data.

        Every key of ``updates`` wins; keys only present in ``existing`` are
        kept unchanged.
        """
        return {**existing, **updates}
