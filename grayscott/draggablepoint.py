import time


# DraggablePoint: a 2D picker with default value and callback throttling
class DraggablePoint:
    def __init__(self, ax, xlim=(0, 1), ylim=(0, 1), update_callback=None, default_value=(0.5, 0.5), callback_interval=0.1):
        self.ax = ax
        self.ax.set_xlim(xlim)
        self.ax.set_ylim(ylim)
        self.xlim = xlim
        self.ylim = ylim
        self.update_callback = update_callback
        self.is_pressed = False
        self.callback_interval = callback_interval
        self.last_callback_time = time.time()  # To track when the last callback was made
        self.value = (float(default_value[0]), float(default_value[1]))

        self.ax.set_aspect('equal', adjustable='box')

        # Initialize point at the default position
        self.point, = ax.plot([self.value[0]], [self.value[1]], 'ro', markersize=10)

        canvas = self.point.figure.canvas
        self.cidpress = canvas.mpl_connect('button_press_event', self.on_press)
        self.cidrelease = canvas.mpl_connect('button_release_event', self.on_release)
        self.cidmotion = canvas.mpl_connect('motion_notify_event', self.on_motion)

    def on_press(self, event):
        if event.inaxes != self.point.axes:
            return
        contains, _ = self.point.contains(event)
        if contains:
            self.is_pressed = True

    def on_release(self, event):
        if not self.is_pressed:
            return
        self.is_pressed = False
        # Always report the final position, whatever the throttle says
        if self.update_callback:
            self.update_callback(*self.value)
        self.point.figure.canvas.draw_idle()

    def on_motion(self, event):
        if not self.is_pressed or event.inaxes != self.point.axes:
            return
        if event.xdata is None or event.ydata is None:
            return

        new_x = min(max(event.xdata, self.xlim[0]), self.xlim[1])
        new_y = min(max(event.ydata, self.ylim[0]), self.ylim[1])
        self.value = (float(new_x), float(new_y))

        self.point.set_data([new_x], [new_y])
        self.point.figure.canvas.draw_idle()

        # Throttle the callback to only call every `callback_interval` seconds
        current_time = time.time()
        if current_time - self.last_callback_time > self.callback_interval:
            self.last_callback_time = current_time
            if self.update_callback:
                self.update_callback(new_x, new_y)
