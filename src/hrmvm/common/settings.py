from pathlib import Path
import logging as lg
import tomllib

from hrmvm.common.hwconf import DEFAULT_REGISTER_COUNT


class MachineSettings:
    register_count: int
    enable_logging: bool

    def __init__(self):
        self.register_count = DEFAULT_REGISTER_COUNT
        self.enable_logging = False

    def update(
        self,
        register_count: int | None = None,
        enable_logging: bool | None = None
    ):
        if register_count is not None:
            self.register_count = register_count

        if enable_logging is not None:
            self.enable_logging = enable_logging

        return self

    def __repr__(self) -> str:
        return f'MachineSettings(registers={self.register_count}, logging={self.enable_logging})'


def load_settings(path: str | Path) -> MachineSettings:
    ''' Reads the [machine] table of a TOML file '''

    if isinstance(path, str):
        path = Path(path)

    lg.debug(f'Loading settings from {path}')
    config = tomllib.loads(path.read_text())
    machine = config.get('machine', {})

    unknown = set(machine) - {'registers', 'logging'}

    if unknown:
        raise ValueError(f'Unknown machine settings {sorted(unknown)} in {path}')

    registers = machine.get('registers')
    logging = machine.get('logging')

    # bool is an int subclass
    if registers is not None and (isinstance(registers, bool) or not isinstance(registers, int)):
        raise ValueError(f'registers must be an integer, got {registers!r}')

    if logging is not None and not isinstance(logging, bool):
        raise ValueError(f'logging must be a boolean, got {logging!r}')

    return MachineSettings().update(register_count=registers, enable_logging=logging)
