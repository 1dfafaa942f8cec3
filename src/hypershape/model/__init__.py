"""
The MODEL layer contains the pure math and the viewer state.
It has NO knowledge of any renderer; it deals with vectors, matrices,
projections, colors and I/O.
"""
