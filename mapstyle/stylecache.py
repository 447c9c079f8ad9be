import common
import mapstyle
import typing

# Resolving a style sheet isn't expensive but a renderer asks for one per
# tile so it's worth keeping the most recently used ones. Style sheets are
# frozen once resolved so the same instance can safely be handed to
# multiple callers.
class StyleSheetCache(object):
    def __init__(self, capacity: int = 256) -> None:
        self._cache = common.LRUCache[
            typing.Tuple[
                float,
                int,
                mapstyle.MapStyle,
                typing.Optional[mapstyle.HighlightWorldPattern]],
            mapstyle.StyleSheet](capacity)

    def capacity(self) -> int:
        return self._cache.capacity()

    def resolve(
            self,
            scale: float,
            options: typing.Union[mapstyle.MapOptions, int],
            style: mapstyle.MapStyle,
            highlightPattern: typing.Optional[mapstyle.HighlightWorldPattern] = None
            ) -> mapstyle.StyleSheet:
        # Validate the scale up front so invalid scales never become keys and
        # scales that clamp to the same value share an entry
        key = (mapstyle.clampScale(scale), int(options), style, highlightPattern)
        return self._cache.getOrCreate(
            key=key,
            createCb=lambda: mapstyle.StyleSheet(
                scale=scale,
                options=options,
                style=style,
                highlightPattern=highlightPattern))

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
