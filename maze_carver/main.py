import argparse
import logging
import random
import sys

from maze_carver.core.config import MazeConfig
from maze_carver.core.errors import MazeError

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def add_render_args(parser: argparse.ArgumentParser):
    defaults = MazeConfig()
    parser.add_argument("--cell-size", type=float, default=defaults.cell_size, help="Cell size in pixels")
    parser.add_argument("--padding", type=float, default=defaults.padding, help="Padding around the maze in pixels")
    parser.add_argument("--image-size", type=int, default=defaults.image_size, help="Width and height of the image in pixels")
    parser.add_argument("--out", type=str, default="maze.png", help="Output PNG path (overwritten)")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: recursive backtracker maze images")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze image")
    gen_parser.add_argument("--size", type=int, default=MazeConfig.size, help="Cells per side")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--start-row", type=int, default=0, help="Row of the first carved cell")
    gen_parser.add_argument("--start-col", type=int, default=0, help="Column of the first carved cell")
    gen_parser.add_argument("--record-events", type=str, help="Save wall removals to binary event log")
    gen_parser.add_argument("--record", action="store_true", help="Record carving video")
    gen_parser.add_argument("--frame-every", type=int, default=25, help="Walls removed per video frame")
    gen_parser.add_argument("--record-out", type=str, default=None, help="Video path (default: auto-named mp4)")
    add_render_args(gen_parser)

    # Replay Command
    replay_parser = subparsers.add_parser("replay", help="Render an image from an event log")
    replay_parser.add_argument("event_file", help="Path to event log file")
    add_render_args(replay_parser)

    return parser

def run_generate(args, logger: logging.Logger):
    from maze_carver.core.grid import Grid
    from maze_carver.core.events import EventWriter
    from maze_carver.core.analysis import MazeAnalyzer
    from maze_carver.algo.dfs import RecursiveBacktracker
    from maze_carver.viz.canvas import Canvas
    from maze_carver.viz.renderer import Renderer

    seed = args.seed
    if seed is None:
        seed = random.SystemRandom().randrange(2 ** 32)

    cfg = MazeConfig(
        size=args.size,
        cell_size=args.cell_size,
        padding=args.padding,
        image_size=args.image_size,
        start=(args.start_row, args.start_col),
        seed=seed,
    ).validate()

    logger.info(f"Generating {cfg.size}x{cfg.size} maze (seed={cfg.seed})...")
    logger.debug(f"Config: {cfg.to_dict()}")

    canvas = Canvas(cfg.image_size, cfg.image_size)
    renderer = Renderer(canvas, cfg.size, config=cfg)
    renderer.draw_initial()

    listeners = [renderer]

    evt_writer = None
    if args.record_events:
        evt_writer = EventWriter(args.record_events)
        evt_writer.write_header(cfg.size, cfg.size)
        listeners.append(evt_writer)
        logger.info(f"Recording events to {args.record_events}...")

    recorder = None
    if args.record:
        from maze_carver.viz.recorder import VideoRecorder
        recorder = VideoRecorder(canvas, active=True, output_file=args.record_out, frame_every=args.frame_every)
        listeners.append(recorder)

    try:
        if recorder:
            # Opening frame shows the fully walled grid
            recorder.start()

        grid = Grid(cfg.size)
        generator = RecursiveBacktracker(grid, seed=cfg.seed, start=cfg.start)
        events = generator.run_all(*listeners)
        logger.info(f"Carved {len(events)} passages, visited {grid.visited_count()} cells")

        stats = MazeAnalyzer.calculate_stats(grid.rows, grid.cols, events)
        logger.debug(f"Stats: {stats}")

        logger.info(f"Saving image to {args.out}...")
        canvas.write_to_file(args.out)
    finally:
        if evt_writer:
            evt_writer.close()
        if recorder:
            recorder.stop()
        canvas.close()

    logger.info("Done.")

def run_replay(args, logger: logging.Logger):
    from maze_carver.core.events import EventReader
    from maze_carver.viz.canvas import Canvas
    from maze_carver.viz.renderer import Renderer

    logger.info(f"Replaying {args.event_file}...")
    reader = EventReader(args.event_file)
    try:
        rows, cols = reader.read_header()
        logger.info(f"Log Header: {rows}x{cols}")

        cfg = MazeConfig(
            size=max(rows, cols),
            cell_size=args.cell_size,
            padding=args.padding,
            image_size=args.image_size,
        ).validate()

        canvas = Canvas(cfg.image_size, cfg.image_size)
        try:
            renderer = Renderer(canvas, rows, cols, config=cfg)
            renderer.draw_initial()
            for event in reader.stream_events():
                renderer(event)
            logger.info(f"Replayed {renderer.walls_removed} wall removals")
            canvas.write_to_file(args.out)
        finally:
            canvas.close()
    finally:
        reader.close()

    logger.info(f"Saved {args.out}")

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            run_generate(args, logger)
        elif args.command == "replay":
            run_replay(args, logger)
    except (MazeError, ValueError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
