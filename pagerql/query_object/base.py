from typing import Any


class LiteralInputBase:
    """ Base class for literal inputs

    A literal input is a string argument given by the client, parsed into an object
    """

    @classmethod
    def parse(cls, literal: str) -> Any:
        """ Convert the input literal into an object """
        raise NotImplementedError

    def serialize(self) -> str:
        """ Export the object back into its literal """
        raise NotImplementedError
