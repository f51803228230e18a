DEFAULT_REGISTER_COUNT = 10     # Floor tiles
CONST_ZERO = 0                  # Preloaded into the last register
INITIAL_BUFFER = 0              # Hands hold zero after reset, not nothing
