"""
Exporting polytopes to OFF files.

Writes a cube, a pentagram and a tesseract to the current directory.
"""
from hypertope import regular_polygon, save_off, to_off, wythoff

cube = wythoff([4, 3]).to_polytope_c()
print(to_off(cube, comments=True))

save_off(cube, "cube.off")
save_off(regular_polygon(5, 2), "pentagram.off", comments=True)
save_off(wythoff([4, 3, 3]), "tesseract.off")
