def task_start():
    """Grow the example tree and stream it to rerun"""
    return {
        'actions': ['python -m sapling_gen.run_grow examples/fractal_plant.toml'],
        'verbosity': 2,
    }

def task_test():
    """Run the test suite"""
    return {
        'actions': ['pytest'],
        'verbosity': 2,
    }
