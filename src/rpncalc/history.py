from collections import namedtuple

from .util import format_number


class HistoryEntry(namedtuple('HistoryEntry', 'expression result')):
    '''
    A successfully evaluated expression and what it evaluated to.
    '''
    __slots__ = ()

    def format(self, precision=None):
        return '{} = {}'.format(self.expression,
                                format_number(self.result, precision))

    def __str__(self):
        return self.format()


class History:
    '''
    Append-only log of evaluated expressions. Numbered from 1 for display.
    '''

    def __init__(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def append(self, expression, result):
        entry = HistoryEntry(expression, result)
        self._entries.append(entry)
        return entry

    def entries(self):
        '''
        Yield (index, expression, result), oldest first, index from 1.
        '''
        for index, entry in enumerate(self._entries, start=1):
            yield index, entry.expression, entry.result

    def clear(self):
        self._entries.clear()

    def format(self, precision=None):
        '''
        Return display lines, "N. expression = result".
        '''
        return ['{}. {}'.format(index, entry.format(precision))
                for index, entry
                in enumerate(self._entries, start=1)]
