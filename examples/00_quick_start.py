"""
Quick Start Example - No Terminal Required

This example builds a small element tree and shows how events bubble
from a child up to the screen. Nothing is drawn: the screen only keeps
track of the tree, focus and resolved boxes.
"""
from nodetui import Box, Element, ElementEvent, Screen


def on_any_click(el, buttons, modifiers, x, y):
    """Receives every click emitted below the screen."""
    print(f"  screen saw click on {el!r} at ({x}, {y})")


def main():
    print("=" * 60)
    print("Quick Start - Tree and Events")
    print("=" * 60)

    screen = Screen({"columns": 40, "rows": 10})

    # Build a panel holding two boxes
    panel = Element({"parent": screen, "left": 2, "top": 1, "width": 30, "height": 6, "border": True})
    first = Box({"parent": panel, "left": 0, "top": 0, "width": 10, "height": 2, "mouse": True})
    second = Box({"parent": panel, "left": 12, "top": 0, "width": 10, "height": 2, "mouse": True})

    print(f"\nScreen children: {screen.children}")
    print(f"Panel children: {panel.children}")
    print(f"Focused: {screen.focused!r}")

    # Resolve every box
    print("\n" + "-" * 60)
    print("Render")
    print("-" * 60)
    screen.render()
    for el in (panel, first, second):
        print(f"  {el!r}: {el.lpos}")

    # Bubbling
    print("\n" + "-" * 60)
    print("Bubbling")
    print("-" * 60)
    screen.on(ElementEvent("click"), on_any_click)
    second.on("click", lambda *args: print("  second handled its own click"))

    target = screen.dispatch_mouse("click", 1, 0, 16, 2)
    print(f"  dispatched to {target!r}")

    # Returning False stops the event before it reaches the screen
    first.on("click", lambda *args: False)
    screen.dispatch_mouse("click", 1, 0, 4, 2)
    print("  first cancelled its click, the screen saw nothing")

    # Teardown
    destroyed = []
    for el in panel.collect_descendants(include_self=True):
        el.on("destroy", lambda el=el: destroyed.append(el))
    panel.destroy()

    print("\n" + "=" * 60)
    print(f"Destroyed {len(destroyed)} elements")
    print("=" * 60)


if __name__ == "__main__":
    main()
