# -*- coding: utf-8 -*-
"""Line-level input for Chemkin-format files.

Reads raw lines from a text stream, splits off comments, and supports
putting back a single line, which is the only lookahead the section
readers need.
"""

# Standard libraries
import logging

# Local imports
from .. import utils

__all__ = ['CKSyntaxError', 'CKLineReader']

comment_char = '!'
"""str: Chemkin comment character"""

undo_comment_char = '%'
"""str: a line beginning with '!%' is not a comment (metadata lines)"""


class CKSyntaxError(ValueError):
    """Error in a Chemkin-format input file.

    Parameters
    ----------
    message : str
        Description of the error.
    line : int, optional
        1-based number of the offending line; values < 1 mean unknown.

    """

    def __init__(self, message, line=-1):
        self.message = message
        self.line = line
        msg = 'Syntax error: ' + message
        if line > 0:
            msg += '  (line {})'.format(line)
        super(CKSyntaxError, self).__init__(msg)


class CKLineReader(object):
    """Reads lines of a Chemkin-format file.

    Parameters
    ----------
    stream : file-like
        Text stream. To see raw line terminators, files should be opened
        with ``newline=''``.
    filename : str, optional
        Name used in diagnostic messages.
    log : `logging.Logger`, optional
        Destination for diagnostics.

    Attributes
    ----------
    line : int
        Number of lines read from the stream so far; i.e., the 1-based
        number of the most recently read line.

    """

    def __init__(self, stream, filename='', log=None):
        self.stream = stream
        self.filename = filename
        self.log = log if log is not None else logging.getLogger(__name__)
        self.line = 0

        self._buf = None
        self._chars = ''
        self._pos = 0
        self._prev_cr = False
        self._at_eof = False

    def _next_char(self):
        if self._pos >= len(self._chars):
            self._chars = self.stream.read(4096)
            self._pos = 0
            if not self._chars:
                return ''
        ch = self._chars[self._pos]
        self._pos += 1
        return ch

    def _read_raw(self):
        """Returns the next raw line, or ``None`` at end of stream."""
        chars = []
        while True:
            ch = self._next_char()
            if not ch:
                if chars:
                    return ''.join(chars)
                return None

            if ch == '\n' and self._prev_cr:
                # second half of a CRLF pair
                self._prev_cr = False
                continue
            self._prev_cr = (ch == '\r')
            if ch in '\r\n':
                return ''.join(chars)

            # convert tabs and other non-printing characters to spaces
            if not ch.isprintable():
                ch = ' '
            chars.append(ch)

    def get_line(self):
        """Returns the next line of the file and its comment.

        Returns
        -------
        line : str
            Portion of the line preceding the comment character, or
            '<EOF>' if the end of the stream has been reached.
        comment : str
            Text following the comment character, if any.

        """

        # a line put back is returned before reading a new one
        if self._buf is not None:
            line, comment = self._buf
            self._buf = None
            return line, comment

        raw = None if self._at_eof else self._read_raw()
        if raw is None:
            self._at_eof = True
            return utils.EOF, ''
        self.line += 1

        # lines that begin with !% are not comments
        if raw[:2] == comment_char + undo_comment_char:
            raw = undo_comment_char + ' ' + raw[2:]

        ind = raw.find(comment_char)
        if ind < 0:
            return raw, ''
        return raw[:ind], raw[ind + 1:]

    def put_line(self, line, comment=''):
        """Puts back a line; the next call to `get_line` returns it.

        Only one line is buffered; putting back a second line before it
        is read replaces the first.
        """
        self._buf = (line, comment)

    def advance_to(self, keyword, stop):
        """Skips lines until one starts with a section keyword.

        Parameters
        ----------
        keyword : str
            Keyword identifier to look for (e.g., 'SPEC').
        stop : str or tuple of str
            Keyword identifier(s) that end the search unsuccessfully.

        Returns
        -------
        bool
            ``True`` if ``keyword`` was found. The line found (``keyword``
            or ``stop``) is put back so it can be read again. ``False``
            if a ``stop`` keyword or the end of the stream is reached.

        """
        if isinstance(stop, str):
            stop = (stop,)

        while True:
            line, comment = self.get_line()
            if line == utils.EOF:
                return False
            head = line.lstrip()
            if utils.match(head, keyword):
                self.put_line(line, comment)
                return True
            if any(utils.match(head, kw) for kw in stop):
                self.put_line(line, comment)
                return False

    def error(self, message):
        """Returns a `CKSyntaxError` at the current line."""
        return CKSyntaxError(message, self.line)

    def warning(self, message):
        """Logs a warning, tagged with the current line number."""
        self.log.warning('%s  (line %d)', message, self.line)
