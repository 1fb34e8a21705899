"""
casecraft Core Engine

Looks transforms up in the registry by identifier and applies them to
text. Unknown identifiers are a no-op by default: the input comes back
unchanged. A strict engine raises UnknownTransformError instead.
"""

import logging
import random
from typing import Iterable, Optional, Union

from .registry import ALIASES, TRANSFORMS, TRANSFORMS_BY_ID, Category, TransformDescriptor
from .transforms.effects import DEFAULT_ZALGO_INTENSITY

logger = logging.getLogger(__name__)

ALL_CATEGORY = "All"
FAVORITES_CATEGORY = "Favorites"


class UnknownTransformError(KeyError):
    """Raised by a strict engine when no transform has the requested id."""
    pass


class TextTransformer:
    """
    Main transformation engine.

    Owns the random source used by the randomized effects (zalgo, cursed)
    so a host can seed it for reproducible output, or give each thread its
    own engine. The registry itself is shared and read-only.
    """

    DEFAULT_INTENSITY = DEFAULT_ZALGO_INTENSITY

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        intensity: float = DEFAULT_INTENSITY,
        strict: bool = False,
    ):
        """
        Initialize the engine.

        Args:
            rng: Random source for randomized transforms.
            seed: Seed for a fresh random source; ignored when rng is given.
            intensity: Default zalgo intensity.
            strict: Raise UnknownTransformError for unknown ids.
        """
        self.rng = rng or random.Random(seed)
        self.intensity = intensity
        self.strict = strict

    def apply(self, transform_id: str, text: str, intensity: Optional[float] = None) -> str:
        """
        Apply a transform to text.

        Args:
            transform_id: Registry id or alias.
            text: The input text.
            intensity: Overrides the engine's zalgo intensity for this call.

        Returns:
            The transformed text, or the input unchanged if the id is unknown
            and the engine is not strict.

        Raises:
            UnknownTransformError: If the id is unknown and strict is set.
        """
        descriptor = find(transform_id)
        if descriptor is None:
            if self.strict:
                raise UnknownTransformError(transform_id)
            logger.debug("Unknown transform %r, returning input unchanged", transform_id)
            return text

        kwargs = {}
        if "rng" in descriptor.params:
            kwargs["rng"] = self.rng
        if "intensity" in descriptor.params:
            kwargs["intensity"] = self.intensity if intensity is None else intensity

        logger.debug("Applying %s to %d characters", descriptor.id, len(text))
        return descriptor.func(text, **kwargs)

    def apply_chain(self, transform_ids: Iterable[str], text: str) -> str:
        """Apply several transforms in order, feeding each output to the next."""
        for transform_id in transform_ids:
            text = self.apply(transform_id, text)
        return text

    @staticmethod
    def list_transforms() -> tuple[TransformDescriptor, ...]:
        return list_transforms()

    @staticmethod
    def find(transform_id: str) -> Optional[TransformDescriptor]:
        return find(transform_id)


def list_transforms() -> tuple[TransformDescriptor, ...]:
    """Return every registered transform in display order."""
    return TRANSFORMS


def find(transform_id: str) -> Optional[TransformDescriptor]:
    """Look a transform up by id or alias."""
    descriptor = TRANSFORMS_BY_ID.get(transform_id)
    if descriptor is None and transform_id in ALIASES:
        descriptor = TRANSFORMS_BY_ID[ALIASES[transform_id]]
    return descriptor


def categories() -> list[str]:
    """Category labels for a filter bar: "All", each category, "Favorites"."""
    return [ALL_CATEGORY] + [c.value for c in Category] + [FAVORITES_CATEGORY]


def _resolve_category(category: Union[Category, str, None]) -> Union[Category, str, None]:
    if category is None or isinstance(category, Category):
        return category
    if category in (ALL_CATEGORY, ""):
        return None
    if category == FAVORITES_CATEGORY:
        return FAVORITES_CATEGORY
    try:
        return Category(category)
    except ValueError:
        raise ValueError(
            f"Unknown category: {category!r}. Expected one of {categories()}"
        ) from None


def filter_transforms(
    transforms: Iterable[TransformDescriptor],
    query: str = "",
    category: Union[Category, str, None] = None,
    favorites: Optional[Iterable[str]] = None,
) -> list[TransformDescriptor]:
    """
    Filter transforms for display, keeping their original order.

    Args:
        transforms: Descriptors to filter, usually list_transforms().
        query: Case-insensitive substring matched against name and description.
        category: A Category, its label, "All"/None for no restriction, or
            "Favorites" to keep only ids in favorites.
        favorites: Favorite ids, used with the "Favorites" category.

    Returns:
        The matching descriptors.
    """
    wanted = _resolve_category(category)
    needle = query.casefold()
    favorite_ids = set(favorites or ())

    result = []
    for t in transforms:
        if needle and needle not in t.name.casefold() and needle not in t.description.casefold():
            continue
        if wanted == FAVORITES_CATEGORY:
            if t.id not in favorite_ids:
                continue
        elif wanted is not None and t.category is not wanted:
            continue
        result.append(t)
    return result


_default_engine = TextTransformer()


def apply(transform_id: str, text: str, intensity: Optional[float] = None) -> str:
    """Apply a transform with the shared default engine."""
    return _default_engine.apply(transform_id, text, intensity=intensity)
