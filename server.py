import argparse
import logging
import os
import time
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from geometry import Point
from hull import HullAlgorithm, UnknownAlgorithmError

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = HullAlgorithm.GRAHAM_SCAN


class InvalidPointsError(ValueError):
    """Request body is not a JSON array of {"x": int, "y": int} objects."""


def _coordinate(item: Mapping[str, Any], key: str, index: int) -> int:
    if key not in item:
        raise InvalidPointsError(f"point {index} is missing {key!r}")
    value = item[key]
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPointsError(f"point {index} has a non-integer {key!r}: {value!r}")
    return value


def parse_points(payload: Any) -> List[Point]:
    if not isinstance(payload, list):
        raise InvalidPointsError("expected a JSON array of points")
    points = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise InvalidPointsError(f"point {index} is not an object")
        points.append(Point(_coordinate(item, "x", index), _coordinate(item, "y", index)))
    return points


def serialize_points(points: Sequence[Point]) -> List[Dict[str, int]]:
    return [{"x": p[0], "y": p[1]} for p in points]


def create_app(
    algorithm: Union[str, HullAlgorithm, None] = None,
    config: Optional[Mapping[str, Any]] = None,
) -> Flask:
    app = Flask(__name__, static_folder="static")
    app.config["HULL_ALGORITHM"] = os.environ.get("HULL_ALGORITHM", DEFAULT_ALGORITHM.value)
    if config:
        app.config.update(config)
    if algorithm is not None:
        app.config["HULL_ALGORITHM"] = algorithm
    # fail at startup rather than on the first request
    app.config["HULL_ALGORITHM"] = HullAlgorithm.parse(app.config["HULL_ALGORITHM"])

    @app.errorhandler(InvalidPointsError)
    @app.errorhandler(UnknownAlgorithmError)
    def _bad_request(error):
        logger.warning("Rejected request to %s: %s", request.path, error)
        return jsonify(error=str(error)), 400

    @app.errorhandler(BadRequest)
    def _malformed_body(error):
        logger.warning("Malformed body for %s: %s", request.path, error.description)
        return jsonify(error="request body is not valid JSON"), 400

    @app.route("/")
    def index():
        return app.send_static_file("index.html")

    @app.route("/algorithms", methods=["GET"])
    def algorithms():
        return jsonify(
            default=app.config["HULL_ALGORITHM"].value,
            algorithms=[{"name": a.value, "label": a.label} for a in HullAlgorithm],
        )

    @app.route("/points", methods=["POST"])
    def points():
        selected = app.config["HULL_ALGORITHM"]
        if "algorithm" in request.args:
            selected = HullAlgorithm.parse(request.args["algorithm"])

        data = parse_points(request.get_json(force=True))
        start = time.perf_counter()
        result = selected.function(data)
        elapsed = time.perf_counter() - start
        logger.info(
            "Algorithm: %s (%d points -> %d hull vertices in %.3f ms)",
            selected.label, len(data), len(result), elapsed * 1000,
        )
        return jsonify(serialize_points(result))

    return app


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="Serve convex hulls over HTTP")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument(
        "--algorithm",
        default=None,
        choices=[a.value for a in HullAlgorithm],
        help="default strategy for POST /points (overrides HULL_ALGORITHM)",
    )
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(algorithm=args.algorithm)
    logger.info("Default hull algorithm: %s", app.config["HULL_ALGORITHM"].label)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
