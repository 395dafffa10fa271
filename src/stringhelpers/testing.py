"""
Tools to help building parametrized unit tests.

Examples
--------
To generate a bunch of tests with various call signatures of the function
`pad`, use
>>> from stringhelpers.testing import Expected, mock
>>> test_pad = Expected(pad)(
...     {mock.pad('ab', 5, '0'):    'ab000',
...      mock.pad('ab', -5, '0'):   '000ab',
...      mock.pad('abcdef', 3):     'abcdef'}
... )

This will generate the same tests as the following code block, but is arguably
much neater
>>> @pytest.mark.parametrize(
...     'string, width, char, expected',
...     [('ab', 5, '0', 'ab000'),
...      ('ab', -5, '0', '000ab'),
...      ('abcdef', 3, None, 'abcdef')]
... )
... def test_pad(string, width, char, expected):
...     assert pad(string, width, char) == expected
"""

# std
import difflib
from contextlib import nullcontext
from collections import abc, defaultdict
from inspect import Parameter, Signature, _ParameterKind, signature

# third-party
import pytest
from loguru import logger


# ---------------------------------------------------------------------------- #
POS, PKW, VAR, KWO, VKW = _ParameterKind


# ---------------------------------------------------------------------------- #

def echo(obj):
    return obj


def to_tuple(obj):
    return obj if isinstance(obj, tuple) else (obj, )


def show_diff(actual, expected):
    """
    Diff helper function. Returns a string containing the unified diff of two
    multiline strings.
    """
    return '\n'.join(difflib.ndiff(actual.splitlines(True),
                                   expected.splitlines(True)))


# ---------------------------------------------------------------------------- #

class WrapArgs:
    def __init__(self, *args, **kws):
        self.args, self.kws = args, tuple(kws.items())

    def __iter__(self):
        return iter((self.args, self.kws))

    def __str__(self):
        return str((self.args, dict(self.kws)))


class Mock:
    def __getattr__(self, _):
        return WrapArgs

    def __call__(self, *args, **kws):
        return WrapArgs(*args, **kws)


mock = Mock()


class Throws:
    def __init__(self, error=Exception):
        self.error = error


class ECHO:
    """Echo sentinal: the expected result is the first argument."""


# ---------------------------------------------------------------------------- #

class expected:
    """
    Decorator that parametrizes a hand-written test function from a mapping of
    argument spec to expected result. The test function should take an
    `expected` parameter.

    Examples
    --------
    >>> @expected({
    ...     ('café', 'cafe'):   True,
    ...     ('café', 'tea'):    False
    ... })
    ... def test_same_plain(a, b, expected):
    ...     assert (plainify(a) == plainify(b)) is expected
    """

    def __init__(self, cases, *args, **kws):
        self.cases = cases
        self.args = args
        self.kws = kws

    def __call__(self, func):
        return Expected(func, **self.kws)(self.cases, *self.args)


class Expected:
    """
    Testing helper for checking expected return values for functions.
    Allows one to build simple parametrized tests without needing to
    explicitly type an exhaustive combination of the function parameters.

    The test function that is created has the same signature as the function
    under test, with a single parameter `expected` added at the end. Assigning
    the output to a variable name starting with 'test_' is important for pytest
    test discovery to work.
    """

    def __init__(self, func, left_transform=echo, right_transform=echo,
                 transform=None, **kws):
        self.func = func
        self.kws = kws
        # whether it's intended to be a test already
        self.is_test = func.__name__.startswith('test_')
        self.sig = signature(func)
        if transform is not None:
            left_transform = right_transform = transform
        self.left_transform = left_transform
        self.right_transform = right_transform

    def __call__(self, cases, *args, **kws):
        """
        Create the test if necessary and parametrize it.

        Parameters
        ----------
        cases : dict or iterable
            Mapping of argument spec to expected result, or sequence of
            `(spec, expected)` pairs. Argument specs are either `mock(...)`
            objects, tuples of positional arguments, or a single positional
            argument.

        Returns
        -------
        function
            The parametrized test function.
        """
        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        test = self.func if self.is_test else self.make_test()

        argspecs = self.get_args(cases)
        names = list(argspecs.keys())
        values = [list(vals) for vals in zip(*argspecs.values())]

        logger.debug('Parametrizing {!r} with {} cases.',
                     test.__name__, len(values))

        return pytest.mark.parametrize(names, values, *args, **kws)(test)

    def bind(self, *args, **kws):
        bound = self.sig.bind(*args, **kws)
        bound.apply_defaults()
        return bound.arguments

    def get_args(self, items):
        # loop through the input argument list (items) and create the full
        # parameter spec for the function by binding each call pattern
        # to the function signature. Return a dict keyed on parameter names
        # containing lists of parameter values for each call.

        values = defaultdict(list)
        for spec, answer in items:
            if not isinstance(spec, WrapArgs):
                # simple construction without use of mock function.
                spec = WrapArgs(*to_tuple(spec))

            args, kws = spec
            kws = {**self.kws, **dict(kws)}

            if self.is_test:
                kws['expected'] = answer
                params = self.bind(*args, **kws)
            else:
                params = self.bind(*args, **kws)
                if answer is ECHO:
                    answer = next(iter(params.values()))
                # signature of created test function has 1 extra parameter
                params['expected'] = answer

            for name, val in params.items():
                values[name].append(val)

        return values

    def make_test(self):
        # -------------------------------------------------------------------- #
        def test(**kws):
            answer = kws.pop('expected')
            ctx = nullcontext()
            if isinstance(answer, Throws):
                ctx = pytest.raises(answer.error)

            with ctx:
                result = self.left_transform(self.func(**kws))

            if isinstance(answer, Throws):
                return

            answer = self.right_transform(answer)
            if result == answer:
                return

            message = (f'Result from function {self.func.__name__!r} is not '
                       'equal to expected answer!'
                       f'\nRESULT:  \n{result!r}'
                       f'\nEXPECTED:\n{answer!r}')
            if isinstance(result, str) and isinstance(answer, str):
                message += f'\nDIFF\n{show_diff(repr(result), repr(answer))}'

            raise AssertionError(message)

        # -------------------------------------------------------------------- #
        # Override signature to add `expected` parameter
        params = [par.replace(default=par.empty, kind=PKW)
                  for par in self.sig.parameters.values()
                  if par.kind not in (VAR, VKW)]
        params.append(Parameter('expected', KWO))
        test.__signature__ = Signature(params)
        test.__name__ = f'test_{self.func.__name__}'

        return test
