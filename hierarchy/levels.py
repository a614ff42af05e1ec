"""
Level configuration.

Turns configured level names or a plain depth count into the ordered set of
levels the tree builder materializes.
"""
import logging
from typing import Iterable, Iterator, Tuple, Union

from core.constants import DEFAULT_LEVEL_DEPTH, DEFAULT_PRODUCT_LEVELS
from core.models import Level

logger = logging.getLogger(__name__)


class LevelSet:
    """
    Ordered, immutable subset of hierarchy levels.

    Category is always present; iteration follows the fixed rank order
    regardless of the order the levels were given in.
    """

    __slots__ = ('_levels',)

    def __init__(self, levels: Iterable[Union[Level, str]] = ()):
        chosen = {Level.CATEGORY}
        for level in levels:
            chosen.add(Level(level))
        self._levels: Tuple[Level, ...] = tuple(
            level for level in Level if level in chosen
        )

    @classmethod
    def from_names(cls, names: Iterable[str]) -> 'LevelSet':
        """
        Build from level names, ignoring the ones that are not levels.

        Args:
            names: Names such as 'category', 'subcategory', 'product'

        Returns:
            LevelSet containing the recognised levels plus category
        """
        valid = []
        for name in names:
            key = str(name).strip().lower()
            try:
                valid.append(Level(key))
            except ValueError:
                logger.debug("Ignoring unknown hierarchy level %r", name)
        return cls(valid)

    @classmethod
    def from_depth(cls, depth: int) -> 'LevelSet':
        """
        Build from a configured number of intermediate levels.

        1 = category, 2 = category + subcategory, 3 or more = all of
        category, subcategory and class. The product level is always included.

        Args:
            depth: Value of system_config.product_levels

        Returns:
            LevelSet for that depth
        """
        if depth is None or depth < 1:
            logger.debug("Invalid level depth %r, using %d", depth, DEFAULT_LEVEL_DEPTH)
            depth = DEFAULT_LEVEL_DEPTH

        levels = [Level.CATEGORY, Level.PRODUCT]
        if depth >= 2:
            levels.append(Level.SUBCATEGORY)
        if depth >= 3:
            levels.append(Level.CLASS)
        return cls(levels)

    @classmethod
    def default(cls) -> 'LevelSet':
        """Category, subcategory and product."""
        return cls.from_names(DEFAULT_PRODUCT_LEVELS)

    @property
    def deepest(self) -> Level:
        """Deepest active level."""
        return self._levels[-1]

    def names(self) -> list:
        """Level names in rank order."""
        return [level.value for level in self._levels]

    def __contains__(self, level) -> bool:
        try:
            return Level(level) in self._levels
        except ValueError:
            return False

    def __iter__(self) -> Iterator[Level]:
        return iter(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LevelSet):
            return NotImplemented
        return self._levels == other._levels

    def __hash__(self) -> int:
        return hash(self._levels)

    def __repr__(self) -> str:
        return f"<LevelSet({', '.join(self.names())})>"
