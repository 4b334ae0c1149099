"""
Layout Example

Places a handful of boxes with the inline and grid modes and prints the
resolved boxes as a character map.
"""
from nodetui import Box, Layout, Screen

COLUMNS = 24
ROWS = 8


def draw(screen, boxes):
    """Paint every box with a letter onto a character grid."""
    grid = [["." for _ in range(screen.columns)] for _ in range(screen.rows)]
    for letter, box in zip("abcdefghij", boxes):
        if box.lpos is None:
            continue
        for y in range(box.lpos.yi, box.lpos.yl):
            for x in range(box.lpos.xi, box.lpos.xl):
                grid[y][x] = letter
    return "\n".join("".join(row) for row in grid)


def demo(mode, sizes):
    screen = Screen({"columns": COLUMNS, "rows": ROWS})
    layout = Layout({
        "parent": screen,
        "left": 0,
        "top": 0,
        "width": 12,
        "height": ROWS,
        "layout": mode,
    })
    boxes = [Box({"parent": layout, "width": w, "height": h}) for w, h in sizes]

    screen.render()

    print(f"\nmode={mode} sizes={sizes}")
    print(draw(screen, boxes))
    screen.destroy()


def main():
    print("=" * 60)
    print("Layout Demo")
    print("=" * 60)

    # Uneven heights: the second row packs under the shorter boxes
    demo("inline", [(4, 3), (4, 1), (4, 2), (4, 1), (4, 1)])

    # Every box starts on a column as wide as the widest box
    demo("grid", [(2, 1), (4, 1), (3, 1), (1, 1), (4, 1)])


if __name__ == "__main__":
    main()
