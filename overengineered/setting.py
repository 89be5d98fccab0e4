"""Game settings: a label, an arithmetic range of values and a chosen one."""

from .csvtext import SEPARATOR, escape_field


def _check_index(index, size, what):
    if not 0 <= index < size:
        raise IndexError(f"{what} {index} out of range for {size} values")


class Setting:
    """A setting whose possible values are start, start + stride, ...

    The default and current values are kept as indices into that range.
    """

    def __init__(
        self,
        label="",
        start=0,
        size=2,
        stride=1,
        default_index=0,
        current_index=None,
    ):
        if current_index is None:
            current_index = default_index
        if size <= 0:
            raise ValueError("a setting needs at least one value")
        if stride == 0:
            raise ValueError("the stride of a setting cannot be zero")
        _check_index(default_index, size, "default index")
        _check_index(current_index, size, "current index")
        self.label = label
        self._start = start
        self._size = size
        self._stride = stride
        self._default_index = default_index
        self._current_index = current_index

    def __repr__(self):
        return (
            f"Setting({self.label!r}, start={self._start}, size={self._size}, "
            f"stride={self._stride}, default_index={self._default_index}, "
            f"current_index={self._current_index})"
        )

    @property
    def start(self):
        return self._start

    @property
    def stride(self):
        return self._stride

    @property
    def default_index(self):
        return self._default_index

    @property
    def current_index(self):
        return self._current_index

    def __len__(self):
        return self._size

    def __getitem__(self, index):
        if index < 0:
            index += self._size
        _check_index(index, self._size, "index")
        return self._start + index * self._stride

    def __iter__(self):
        return (self._start + n * self._stride for n in range(self._size))

    def at(self, index):
        """Return the value at a non-negative index, checking bounds."""
        _check_index(index, self._size, "index")
        return self._start + index * self._stride

    def first(self):
        return self.at(0)

    def last(self):
        return self.at(self._size - 1)

    def default_value(self):
        return self.at(self._default_index)

    def current_value(self):
        return self.at(self._current_index)

    def set(self, index):
        """Make the value at index the current one and return it."""
        if index == self._size:
            raise ValueError("cannot select the position past the last value")
        value = self.at(index)
        self._current_index = index
        return value

    def to_csv(self):
        """Return the record saved in the user's configuration file."""
        return f"{escape_field(self.label)}{SEPARATOR}{self._current_index}"

    @classmethod
    def read(cls, reader):
        """Read a definition: label, start, size, stride, default index."""
        label = reader.read_field()
        start = reader.read_int()
        reader.ignore()
        size = reader.read_int()
        reader.ignore()
        stride = reader.read_int()
        reader.ignore()
        default_index = reader.read_int()
        reader.ignore()
        return cls(label, start, size, stride, default_index)