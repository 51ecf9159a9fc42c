"""
The MODEL layer contains pure data structures and the numerical core.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with the Lorenz equations and the trail of computed points.
"""
