import logging as lg
from typing import Iterator, Sequence

from hrmvm.common.ops import Instruction, Op
from hrmvm.runtime.errors import InvalidJumpAddress


class LabelTable:
    ''' Label id -> instruction address, first occurrence wins '''
    addresses: dict[int, int]

    def __init__(self, instructions: Sequence[Instruction]):
        self.addresses = dict()

        for address, ins in enumerate(instructions):
            if ins.op != Op.LABEL:
                continue

            label_id = ins.arg
            assert label_id is not None

            if label_id in self.addresses:
                lg.warning(
                    f'Label {label_id} redefined at {address}, '
                    f'keeping {self.addresses[label_id]}'
                )
                continue

            self.addresses[label_id] = address

    def resolve(self, label_id: int) -> int:
        address = self.addresses.get(label_id)

        if address is None:
            raise InvalidJumpAddress(label_id)

        return address

    def __contains__(self, label_id: int) -> bool:
        return label_id in self.addresses

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[int]:
        return iter(self.addresses)
