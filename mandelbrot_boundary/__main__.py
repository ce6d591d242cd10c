from .cli import app

app(prog_name="mandelbrot-boundary")
