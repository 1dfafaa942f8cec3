"""
hypershape
==========
Generation, rotation and projection of four-dimensional geometry.

Shapes are produced by the generators in `hypershape.shapes`, rotated and
projected to 3D by the `hypershape.model` layer, and rendered by whatever
front end consumes the projected frames.
"""
