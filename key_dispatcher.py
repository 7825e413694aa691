import curses


CTRL_C = 3
CTRL_D = 4

QUIT = "quit"
MOVE_LEFT = "move_left"
MOVE_RIGHT = "move_right"
MOVE_UP = "move_up"
MOVE_DOWN = "move_down"
JUMP_TO_START = "jump_to_start"
JUMP_TO_END = "jump_to_end"

KEY_COMMANDS = {
    CTRL_C: QUIT,
    CTRL_D: QUIT,
    ord("h"): MOVE_LEFT,
    curses.KEY_LEFT: MOVE_LEFT,
    ord("l"): MOVE_RIGHT,
    curses.KEY_RIGHT: MOVE_RIGHT,
    ord("k"): MOVE_UP,
    curses.KEY_UP: MOVE_UP,
    ord("j"): MOVE_DOWN,
    curses.KEY_DOWN: MOVE_DOWN,
    curses.KEY_HOME: JUMP_TO_START,
    curses.KEY_END: JUMP_TO_END,
}


class KeyDispatcher:
    def command_for(self, key):
        if key is None:
            return None
        return KEY_COMMANDS.get(key)

    def dispatch(self, key, state, width, height, row_count) -> bool:
        """Apply `key` to `state`; True means the frame loop should stop."""
        cmd = self.command_for(key)
        if cmd is None:
            return False
        if cmd == QUIT:
            return True

        if cmd == MOVE_LEFT:
            state.move_left()
        elif cmd == MOVE_RIGHT:
            state.move_right(width)
        elif cmd == MOVE_UP:
            state.move_up()
        elif cmd == MOVE_DOWN:
            state.move_down(height, row_count)
        elif cmd == JUMP_TO_START:
            state.jump_to_start()
        elif cmd == JUMP_TO_END:
            state.jump_to_end(height, row_count)
        return False
