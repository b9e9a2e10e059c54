"""Demo run: unit shapes, rejected negative dimensions and two scenes."""
import logging
import sys

from geo import Circle, EquilateralTriangle, NegativeDimension, Scene, Square
from geo.logging_config import level_from_env, setup_logging

logger = logging.getLogger("geo.demo")


def demo() -> None:
    logger.info("Circumference of unity circle: %s", Circle(1).perimeter())
    logger.info("Circumference of unity square: %s", Square(1).perimeter())
    logger.info(
        "Circumference of unity equilateral triangle: %s",
        EquilateralTriangle(1).perimeter(),
    )

    for kind, label, shape_type in (
        ("circle", "radius", Circle),
        ("square", "length", Square),
        ("equilateral triangle", "length", EquilateralTriangle),
    ):
        logger.info("Creating %s with %s -1", kind, label)
        try:
            shape_type(-1.0)
        except NegativeDimension as e:
            logger.info("Caught exception: %s", e)

    scene = Scene()
    scene.add_shape(Circle(1))
    scene.add_shape(Square(1))
    print(f"Circumference of all unity shapes: {scene.total_perimeter()}")

    print(f"Circumference of the empty scene: {Scene().total_perimeter()}")


def main() -> int:
    setup_logging(level=level_from_env())
    try:
        demo()
    except NegativeDimension as e:
        logger.error("Error: %s", e)
    except Exception:
        logger.exception("Unexpected failure, not a shape validation error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
