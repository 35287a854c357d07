from .config import Config, Parameters
from .controller import SimulationController, State
from .render import intensity_field, to_intensity, to_rgba
from .simulation import LAPLACIAN_KERNEL, Field, Grid, initialize, laplacian, step
