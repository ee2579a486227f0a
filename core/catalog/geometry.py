# -*- coding: utf-8 -*-
"""Map drawing collaborators.

The resolver only talks to the `Renderer` / `SoundPlayer` protocols.
`GeoJsonCanvas` is the shipped renderer: it records every draw call as a
GeoJSON feature (map grid coordinates, one unit per room) so the web UI or
the CLI can display it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)

Bounds = Tuple[float, float, float, float]


class Renderer(Protocol):
    def draw_geo(self, geo: Any, label: str) -> None: ...

    def draw_room_geo(self, coords: Sequence[float], label: str) -> None: ...

    def draw_marker(self, coords: Sequence[float], label: str, marker: Optional[str] = None) -> None: ...

    def clear(self) -> None: ...

    def zoom_to_bounds(self) -> None: ...


class SoundPlayer(Protocol):
    def play(self, src: str, volume: float) -> None: ...


def _is_point(val: Any) -> bool:
    return (
        isinstance(val, (list, tuple))
        and len(val) >= 2
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in val[:2])
    )


def iter_points(coords: Any) -> Iterable[Tuple[float, float]]:
    """Yield every (x, y) pair inside an arbitrarily nested coordinate array."""
    if _is_point(coords):
        yield float(coords[0]), float(coords[1])
        return
    if isinstance(coords, (list, tuple)):
        for part in coords:
            yield from iter_points(part)


def as_geometry(geo: Any) -> Optional[Dict[str, Any]]:
    """Coerce area geometry into a GeoJSON geometry dict.

    Accepts a geometry, a Feature, a FeatureCollection (first feature) or a
    bare ring / list of rings (treated as a Polygon).
    """
    if isinstance(geo, dict):
        kind = geo.get("type")
        if kind == "Feature":
            return as_geometry(geo.get("geometry"))
        if kind == "FeatureCollection":
            feats = geo.get("features") or []
            return as_geometry(feats[0]) if feats else None
        if kind and "coordinates" in geo:
            return {"type": str(kind), "coordinates": geo.get("coordinates")}
        return None
    if isinstance(geo, (list, tuple)) and geo:
        if _is_point(geo[0]):
            return {"type": "Polygon", "coordinates": [list(geo)]}
        return {"type": "Polygon", "coordinates": [list(r) for r in geo]}
    return None


def room_polygon(coords: Sequence[float]) -> Dict[str, Any]:
    x, y = float(coords[0]), float(coords[1])
    ring = [[x, y], [x + 1, y], [x + 1, y + 1], [x, y + 1], [x, y]]
    return {"type": "Polygon", "coordinates": [ring]}


class GeoJsonCanvas:
    """Renderer that collects drawn shapes as GeoJSON features."""

    def __init__(self) -> None:
        self.features: List[Dict[str, Any]] = []
        self.bounds: Optional[Bounds] = None

    def _push(self, geometry: Dict[str, Any], props: Dict[str, Any]) -> None:
        self.features.append({"type": "Feature", "geometry": geometry, "properties": props})

    def draw_geo(self, geo: Any, label: str) -> None:
        geometry = as_geometry(geo)
        if geometry is None:
            logger.debug("Skipping unusable area geometry for %r", label)
            return
        self._push(geometry, {"kind": "region", "label": label})

    def draw_room_geo(self, coords: Sequence[float], label: str) -> None:
        if not _is_point(coords):
            logger.debug("Skipping room with bad coords %r (%s)", coords, label)
            return
        self._push(room_polygon(coords), {"kind": "room", "label": label})

    def draw_marker(self, coords: Sequence[float], label: str, marker: Optional[str] = None) -> None:
        if not _is_point(coords):
            logger.debug("Skipping marker with bad coords %r (%s)", coords, label)
            return
        x, y = float(coords[0]), float(coords[1])
        props: Dict[str, Any] = {"kind": "marker", "label": label}
        if marker:
            props["marker"] = str(marker)
        # markers sit in the middle of their room cell
        self._push({"type": "Point", "coordinates": [x + 0.5, y + 0.5]}, props)

    def clear(self) -> None:
        self.features = []
        self.bounds = None

    def zoom_to_bounds(self) -> None:
        pts = [p for f in self.features for p in iter_points(f["geometry"].get("coordinates"))]
        if not pts:
            self.bounds = None
            return
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        self.bounds = (min(xs), min(ys), max(xs), max(ys))

    def to_geojson(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"type": "FeatureCollection", "features": list(self.features)}
        if self.bounds is not None:
            doc["bbox"] = list(self.bounds)
        return doc


class SoundEvents:
    """Sound player that queues playback requests for the caller to forward."""

    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def play(self, src: str, volume: float) -> None:
        self.events.append({"event": "sound", "src": str(src), "volume": float(volume)})
