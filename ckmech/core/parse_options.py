"""Options controlling how strictly a mechanism is checked.
"""

# Related modules
import yaml

__all__ = ['ParseOptions', 'load_options', 'options_from_dict']


class ParseOptions(object):
    """Parsing options.

    Attributes
    ----------
    check_temp_order : bool
        If ``True``, thermo records must satisfy Tlow <= Tmid <= Thigh.
    missing_tmid_fatal : bool
        If ``True``, a species without a midpoint temperature is an error
        when no default midpoint temperature is available; otherwise the
        error is only logged.
    verbose : bool
        If ``True``, the data of every thermo record read is logged
        (debug level).
    default_temps : list of float, optional
        Default (low, mid, high) temperatures, e.g. for use with
        THERMO NO_TMID when the file gives none.

    """

    def __init__(self, check_temp_order=False, missing_tmid_fatal=False,
                 verbose=False, default_temps=None):
        self.check_temp_order = check_temp_order
        self.missing_tmid_fatal = missing_tmid_fatal
        self.verbose = verbose
        self.default_temps = default_temps

    def __repr__(self):
        return ('ParseOptions(check_temp_order={}, missing_tmid_fatal={}, '
                'verbose={}, default_temps={})'.format(
                    self.check_temp_order, self.missing_tmid_fatal,
                    self.verbose, self.default_temps))


def load_options(input_file):
    """Read parsing options from a YAML file.

    Example file::

        check temperature order: true
        missing tmid fatal: false
        verbose: false
        default temperatures: [300.0, 1000.0, 5000.0]

    Parameters
    ----------
    input_file : str
        Filename with YAML-format options.

    Returns
    -------
    `ParseOptions`
        Options; any key not given keeps its default.

    Raises
    ------
    ValueError
        If the file holds unknown keys or invalid values.

    """

    with open(input_file, 'r') as f:
        pars = yaml.safe_load(f)
    return options_from_dict(pars or {})


def options_from_dict(pars):
    """Build `ParseOptions` from a dict with the YAML file keys."""
    if not isinstance(pars, dict):
        raise ValueError('options must be given as a mapping.')

    known = ['check temperature order', 'missing tmid fatal', 'verbose',
             'default temperatures']
    unknown = [key for key in pars if key not in known]
    if unknown:
        raise ValueError('unknown option(s): ' +
                         ', '.join(str(key) for key in unknown))

    for key in known[:3]:
        if not isinstance(pars.get(key, False), bool):
            raise ValueError('option "{}" must be true or false.'.format(key))

    temps = pars.get('default temperatures', None)
    if temps is not None:
        try:
            temps = [float(t) for t in temps]
        except (TypeError, ValueError):
            raise ValueError('default temperatures must be a list of '
                             'numbers.')
        if len(temps) != 3:
            raise ValueError('default temperatures must be given as '
                             '[low, mid, high].')

    return ParseOptions(check_temp_order=pars.get('check temperature order',
                                                  False),
                        missing_tmid_fatal=pars.get('missing tmid fatal',
                                                    False),
                        verbose=pars.get('verbose', False),
                        default_temps=temps
                        )
