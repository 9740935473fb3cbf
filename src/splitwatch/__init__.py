""" cumulative stop-watch with unit conversion and simple benchmarking """
