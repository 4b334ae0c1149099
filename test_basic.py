import sys

sys.path.insert(0, "packages/nodetui/src")

from nodetui import Box, Element, Layout, Screen
from nodetui.types import Coords

print("Testing basic tree...")

screen = Screen({"columns": 80, "rows": 24})
panel = Element({"parent": screen, "left": 0, "top": 0, "width": 20, "height": 5})
print(f"Screen created: {screen.columns}x{screen.rows}, children={len(screen.children)}")

screen.render()
assert panel.lpos == Coords(0, 20, 0, 5)
print(f"Panel rendered at: {panel.lpos}")

print("Testing Layout...")

layout = Layout({"parent": screen, "left": 0, "top": 5, "width": 10, "height": 10})
boxes = [Box({"parent": layout, "width": 4, "height": 2}) for _ in range(3)]
screen.render()
print(f"Boxes placed at: {[b.lpos for b in boxes]}")
assert boxes[2].lpos == Coords(0, 4, 7, 9)

screen.destroy()
print("All basic tests passed!")
