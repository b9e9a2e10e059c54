
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "group_shape: marks tests related to shape functionality")
    config.addinivalue_line("markers", "group_circle: marks tests related to circle functionality")
    config.addinivalue_line("markers", "group_square: marks tests related to square functionality")
    config.addinivalue_line("markers", "group_triangle: marks tests related to equilateral triangle functionality")
    config.addinivalue_line("markers", "group_validation: marks tests related to dimension validation")
    config.addinivalue_line("markers", "group_scene: marks tests related to scene aggregation")
    config.addinivalue_line("markers", "group_demo: marks tests related to the demo entry point")
