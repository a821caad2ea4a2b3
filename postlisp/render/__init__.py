from postlisp.render.scene import to_scene, to_primitive, Box, Dot, Segment, ArcItem, Oval
from postlisp.render.svg import scene_to_svg

__all__ = ["to_scene", "to_primitive", "Box", "Dot", "Segment", "ArcItem", "Oval", "scene_to_svg"]
