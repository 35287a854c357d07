import logging

import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.widgets import Button

from .config import Parameters
from .controller import SimulationController
from .draggablepoint import DraggablePoint

logger = logging.getLogger(__name__)

axcolor = 'lightgoldenrodyellow'


class GrayScottApp:
    """
    Matplotlib window around a SimulationController: the image, Play /
    Pause / Reset buttons, a (feed, kill) picker applied on Reset, and
    mouse drawing that seeds chemical B.
    """

    def __init__(self, controller=None, interval=30, brush_radius=0):
        self.controller = controller if controller is not None else SimulationController()
        self.interval = interval
        self.brush_radius = brush_radius
        self.pending_parameters = self.controller.parameters
        self.drawing = False
        self.ani = None

        self.fig = plt.figure(figsize=(8, 6))

        # Image axes
        self.ax_img = self.fig.add_axes([0.05, 0.1, 0.6, 0.8])
        self.img = self.ax_img.imshow(self.controller.frame(), interpolation='nearest')
        self.ax_img.set_title('Gray-Scott Model')
        self.ax_img.set_axis_off()
        self.status_text = self.ax_img.text(0.0, -0.05, '', transform=self.ax_img.transAxes)
        self._update_status()

        # 2D picker for feed (f) and kill (k) rates
        self.ax_f_k = self.fig.add_axes([0.72, 0.5, 0.22, 0.3], facecolor=axcolor)
        params = self.controller.parameters
        self.picker = DraggablePoint(
            self.ax_f_k, xlim=(0, 0.1), ylim=(0, 0.1), update_callback=self.on_parameters,
            default_value=(params.feed, params.kill), callback_interval=0.1
        )
        self.ax_f_k.set_title('f, k (on Reset)', fontsize=9)
        self.ax_f_k.set_xlabel('f', fontsize=9)
        self.ax_f_k.set_ylabel('k', fontsize=9)

        # Control buttons
        ax_play = self.fig.add_axes([0.72, 0.3, 0.1, 0.06])
        ax_pause = self.fig.add_axes([0.84, 0.3, 0.1, 0.06])
        ax_reset = self.fig.add_axes([0.72, 0.2, 0.22, 0.06])
        self.button_play = Button(ax_play, 'Play', color=axcolor, hovercolor='0.975')
        self.button_pause = Button(ax_pause, 'Pause', color=axcolor, hovercolor='0.975')
        self.button_reset = Button(ax_reset, 'Reset', color=axcolor, hovercolor='0.975')
        self.button_play.on_clicked(self.on_play)
        self.button_pause.on_clicked(self.on_pause)
        self.button_reset.on_clicked(self.on_reset)

        # Mouse drawing on the image
        self.fig.canvas.mpl_connect('button_press_event', self.on_mouse_press)
        self.fig.canvas.mpl_connect('button_release_event', self.on_mouse_release)
        self.fig.canvas.mpl_connect('motion_notify_event', self.on_mouse_move)

    def _update_status(self):
        state = 'running' if self.controller.running else 'paused'
        self.status_text.set_text(f"Generation {self.controller.generation} ({state})")

    def _refresh(self, pixels=None):
        if pixels is None:
            pixels = self.controller.frame()
        self.img.set_data(pixels)
        self._update_status()
        self.fig.canvas.draw_idle()

    # Control panel
    def on_play(self, event):
        self.controller.play()
        self._update_status()

    def on_pause(self, event):
        self.controller.pause()
        self._update_status()

    def on_reset(self, event):
        parameters = self.pending_parameters
        if parameters == self.controller.parameters:
            parameters = None
        self.controller.reset(parameters)
        self._refresh()

    def on_parameters(self, feed, kill):
        self.pending_parameters = Parameters(
            d_a=self.controller.parameters.d_a, d_b=self.controller.parameters.d_b,
            feed=float(feed), kill=float(kill),
        )
        logger.debug("Pending parameters %s", self.pending_parameters)

    # Pointer input
    def on_mouse_press(self, event):
        if event.inaxes == self.ax_img:
            self.drawing = True
            self.add_draw(event)

    def on_mouse_release(self, event):
        self.drawing = False

    def on_mouse_move(self, event):
        if self.drawing:
            self.add_draw(event)

    def add_draw(self, event):
        if event.inaxes != self.ax_img or event.xdata is None or event.ydata is None:
            return
        # Pixel centers sit on integer data coordinates
        x = int(round(event.xdata))
        y = int(round(event.ydata))
        r = self.brush_radius
        seeded = False
        for i in range(-r, r + 1):
            for j in range(-r, r + 1):
                if i**2 + j**2 <= r**2:
                    seeded |= self.controller.seed(x + i, y + j)
        if seeded and not self.controller.running:
            self._refresh()

    # Timer
    def animate(self, frame):
        pixels = self.controller.tick()
        if pixels is not None:
            self.img.set_data(pixels)
            self._update_status()
        return [self.img, self.status_text]

    def run(self):
        self.ani = animation.FuncAnimation(self.fig, self.animate, interval=self.interval,
                                           blit=False, cache_frame_data=False)
        plt.show()


def main():
    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    GrayScottApp().run()

