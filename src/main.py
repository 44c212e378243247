"""Entry point for the Grape Box puzzle.

Sets up the engine (ECS world, event bus, game systems) and the Arcade window
that feeds it pointer input and frame ticks.
"""
import logging

from arcade import Window, run, set_background_color, color

from grapebox.engine import GrapeBoxEngine
from grapebox.events.bus import (
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TICK,
)
from grapebox.systems.input import InputSystem
from grapebox.systems.render import RenderSystem


class GrapeBoxWindow(Window):
    def __init__(self):
        super().__init__(900, 640, "Grape Box", resizable=True)
        self.set_update_rate(1/60)
        self.engine = GrapeBoxEngine()
        self.event_bus = self.engine.event_bus
        self.world = self.engine.world
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        # Hit-testing uses the same layout the renderer draws.
        self.engine.set_geometry(self.render_system.cell_geometry)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_DRAG, x=x, y=y, dx=dx, dy=dy, buttons=buttons)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_LEAVE, x=x, y=y)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    GrapeBoxWindow()
    run()

if __name__ == "__main__":
    main()
