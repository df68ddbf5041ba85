from collections import deque

from .util import StackUnderflow


class OperandStack:
    '''
    Stack of floats an expression is evaluated against.

    Top of the stack is the rightmost element of the underlying deque.
    '''

    def __init__(self):
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self._items))

    def size(self):
        return len(self._items)

    def push(self, value):
        '''
        Push value onto the top of the stack.
        '''
        self._items.append(float(value))

    def pop(self):
        '''
        Pop and return the top of the stack.
        '''
        if not self._items:
            raise StackUnderflow(None, 1, 0)
        return self._items.pop()

    def peek(self):
        '''
        Return the top of the stack without removing it.
        '''
        if not self._items:
            raise StackUnderflow(None, 1, 0)
        return self._items[-1]

    def popmany(self, n, operator=None):
        '''
        Pop n values, topmost first.

        Nothing is popped if there are fewer than n values.

        :param operator: Name to blame in the StackUnderflow, if any.
        '''
        if len(self._items) < n:
            raise StackUnderflow(operator, n, len(self._items))
        return [self._items.pop() for _ in range(n)]

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self._items.clear()

    def snapshot(self):
        '''
        Return a copy of the stack, bottom first.
        '''
        return tuple(self._items)
