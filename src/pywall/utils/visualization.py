"""
Visualization tools for wall coupling terms
"""
import numpy as np
import matplotlib.pyplot as plt
from typing import Iterable

class WallVisualizer:
    """
    Records and plots the volume and heat flow rates of a wall over time
    """
    def __init__(self, wall):
        self.wall = wall
        self.fig = None
        self.history = {
            't': [],
            'vdot': [],
            'Q': []
        }

    def record(self, t: float):
        """Evaluate the wall at time t and save the result"""
        self.history['t'].append(t)
        self.history['vdot'].append(self.wall.vdot(t))
        self.history['Q'].append(self.wall.Q(t))

    def evaluate(self, times: Iterable[float]):
        """Record the wall at each time in times"""
        for t in times:
            self.record(t)

    def clear(self):
        for values in self.history.values():
            values.clear()

    def plot_history(self):
        """
        Plot the recorded volume and heat flow rates

        Returns:
            matplotlib.figure.Figure
        """
        t = np.asarray(self.history['t'])

        if self.fig is None:
            self.fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)
        else:
            ax1, ax2 = self.fig.axes
            for ax in (ax1, ax2):
                ax.clear()
        self.fig.suptitle(f'Wall {self.wall.name}')

        ax1.plot(t, self.history['vdot'], 'b-', label='Volume rate')
        ax1.set_ylabel('dV/dt [m³/s]')
        ax1.legend()
        ax1.grid(True)

        ax2.plot(t, self.history['Q'], 'r-', label='Heat rate')
        ax2.set_xlabel('Time [s]')
        ax2.set_ylabel('Q [W]')
        ax2.legend()
        ax2.grid(True)

        self.fig.tight_layout()
        return self.fig
