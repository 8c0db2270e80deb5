import pygame
from rat_maze.core.cells import Cell
from rat_maze.algo.base import SolveAborted

class RendererClosed(SolveAborted):
    """Raised from inside a solve when the window is closed."""
    pass

class Renderer:
    """
    A maze listener that draws every frame it is handed into a pygame
    window. Works with a live Grid or a replayed Frame: it only reads
    width, height and cells.
    """
    COLOR_BG = (10, 10, 10)
    COLORS = {
        Cell.EMPTY: (30, 30, 30),
        Cell.WALL:  (200, 200, 200),
        Cell.TRIED: (160, 60, 60),      # Red tint
        Cell.PATH:  (60, 100, 160),     # Blue tint
        Cell.AGENT: (255, 215, 0),      # Gold
        Cell.GOAL:  (80, 200, 120),
    }

    def __init__(self, cell_size=24, fps=30, record=False, output_file=None, record_name="maze", max_width=1280, max_height=720):
        self.cell_size = cell_size
        self.fps = fps
        self.max_width = max_width
        self.max_height = max_height

        from rat_maze.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record, output_file=output_file, fps=fps, maze_name=record_name)

        self.surface = None
        self.clock = None
        self.font = None
        self.step_count = 0
        self.status = "Running"
        self.last_maze = None

    def init_window(self, width: int, height: int):
        pygame.init()
        pygame.display.set_caption(f"Rat Maze - {width}x{height}")

        # Shrink cells until the whole maze fits
        hud = 30
        self.cell_size = max(1, min(self.cell_size,
                                    self.max_width // width,
                                    (self.max_height - hud) // height))
        self.offset_y = hud
        self.surface = pygame.display.set_mode((width * self.cell_size, height * self.cell_size + hud))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
        return True

    def draw_grid(self, maze):
        self.surface.fill(self.COLOR_BG)
        size = self.cell_size
        for y in range(maze.height):
            for x in range(maze.width):
                cell = Cell(maze.cells[y * maze.width + x])
                rect = (x * size, y * size + self.offset_y, size, size)
                pygame.draw.rect(self.surface, self.COLORS[cell], rect)

    def draw_hud(self, maze):
        text = f"Step: {self.step_count}  Size: {maze.width}x{maze.height}  Status: {self.status}"
        if self.recorder.active:
            text += "  REC"
        lbl = self.font.render(text, True, (255, 255, 255))
        self.surface.blit(lbl, (6, 6))

    def draw(self, maze):
        self.draw_grid(maze)
        self.draw_hud(maze)
        pygame.display.flip()
        if self.recorder.active:
            self.recorder.capture_frame(self.surface)

    def __call__(self, maze):
        if self.surface is None:
            self.init_window(maze.width, maze.height)

        if not self.handle_input():
            raise RendererClosed("Visualization closed")

        self.step_count += 1
        self.last_maze = maze
        self.draw(maze)
        self.clock.tick(self.fps)

    def wait(self, status: str):
        """Keeps the last frame on screen until the window is closed."""
        if self.surface is None or self.last_maze is None:
            return
        self.status = status
        while self.handle_input():
            self.draw_grid(self.last_maze)
            self.draw_hud(self.last_maze)
            pygame.display.flip()
            self.clock.tick(15)

    def close(self):
        self.recorder.stop()
        if self.surface is not None:
            pygame.quit()
            self.surface = None
