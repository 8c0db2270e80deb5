from typing import Optional
from rat_maze.core.events import EventReader, EVT_FRAME, EVT_RESULT

class ReplayAdapter:
    """
    Feeds the frames of an event log to a listener, the same way a live
    solve would. Returns the recorded result, or None if the log ends
    before one was written.
    """
    def __init__(self, reader: EventReader):
        self.reader = reader
        self.step_count = 0

    def replay(self, listener) -> Optional[bool]:
        if listener is None:
            raise ValueError("Listener cannot be None")

        if not self.reader.width:
            self.reader.read_header()

        result = None
        for type_code, data in self.reader.stream_events():
            if type_code == EVT_FRAME:
                self.step_count += 1
                listener(data)
            elif type_code == EVT_RESULT:
                result = data
        return result
