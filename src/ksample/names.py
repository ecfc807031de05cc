""" Source of unique-looking names and identifiers for generated samples.
    Names follow the familiar "adjective_surname" pattern with a short hex
    suffix, which is enough to keep concurrently running tests from stepping
    on each other's topics and groups. Nothing here is cryptographically
    strong; it is not meant to be.
"""

import random
import threading
import uuid

from . import config


adjectives = (
    'admiring', 'agitated', 'amazing', 'angry', 'awesome', 'blissful',
    'bold', 'brave', 'busy', 'charming', 'clever', 'compassionate',
    'competent', 'confident', 'cranky', 'crazy', 'dazzling', 'determined',
    'distracted', 'dreamy', 'eager', 'ecstatic', 'elastic', 'elated',
    'elegant', 'epic', 'exciting', 'fervent', 'festive', 'flamboyant',
    'focused', 'friendly', 'frosty', 'funny', 'gallant', 'gifted',
    'goofy', 'gracious', 'happy', 'hardcore', 'heuristic', 'hopeful',
    'hungry', 'infallible', 'inspiring', 'jolly', 'jovial', 'keen',
    'kind', 'laughing', 'loving', 'lucid', 'magical', 'modest',
    'musing', 'mystifying', 'naughty', 'nervous', 'nice', 'nifty',
    'nostalgic', 'objective', 'optimistic', 'peaceful', 'pedantic',
    'pensive', 'practical', 'priceless', 'quirky', 'quizzical',
    'relaxed', 'reverent', 'romantic', 'sad', 'serene', 'sharp',
    'silly', 'sleepy', 'stoic', 'strange', 'stupefied', 'suspicious',
    'sweet', 'tender', 'thirsty', 'trusting', 'upbeat', 'vibrant',
    'vigilant', 'vigorous', 'wizardly', 'wonderful', 'xenodochial',
    'youthful', 'zealous', 'zen',
)

surnames = (
    'agnesi', 'albattani', 'allen', 'archimedes', 'babbage', 'banach',
    'bardeen', 'bartik', 'bell', 'blackwell', 'bohr', 'booth', 'borg',
    'bose', 'brahmagupta', 'brattain', 'brown', 'carson', 'cerf',
    'chandrasekhar', 'chaplygin', 'clarke', 'curie', 'darwin', 'dijkstra',
    'dirac', 'easley', 'edison', 'einstein', 'elion', 'engelbart',
    'euclid', 'euler', 'faraday', 'fermat', 'fermi', 'feynman',
    'franklin', 'galileo', 'gates', 'goldberg', 'goodall', 'hamilton',
    'hawking', 'heisenberg', 'hellman', 'hertz', 'hodgkin', 'hopper',
    'hypatia', 'jackson', 'jang', 'jennings', 'johnson', 'kalam',
    'kapitsa', 'keller', 'kepler', 'knuth', 'kowalevski', 'lamarr',
    'lamport', 'leakey', 'leavitt', 'lovelace', 'lumiere', 'mahavira',
    'mayer', 'mccarthy', 'mcclintock', 'meitner', 'mendel', 'merkle',
    'mirzakhani', 'montalcini', 'moore', 'morse', 'napier', 'nash',
    'newton', 'nightingale', 'nobel', 'noether', 'noyce', 'pare',
    'pascal', 'pasteur', 'payne', 'perlman', 'pike', 'poincare',
    'ptolemy', 'raman', 'ramanujan', 'ride', 'ritchie', 'rosalind',
    'sammet', 'shannon', 'shockley', 'sinoussi', 'snyder', 'spence',
    'stonebraker', 'swanson', 'swartz', 'tesla', 'thompson', 'torvalds',
    'turing', 'varahamihira', 'visvesvaraya', 'volhard', 'wescoff',
    'wilbur', 'wiles', 'williams', 'wilson', 'wing', 'wozniak', 'wright',
    'yalow', 'yonath',
)


class NameSource:
    """ A seedable generator of names and 128-bit identifiers. A single
        instance may be shared between threads; access to the underlying
        random number generator is serialized.

        :ivar seed: The seed supplied at construction, if any.
    """

    suffix_digits = 6

    def __init__(self, seed=None):

        self.seed = seed
        self.rng = random.Random(seed)
        self.lock = threading.Lock()


    def _hex(self, digits):
        return '%0*x' % (digits, self.rng.getrandbits(digits * 4))


    def name(self):
        """ Return a new name, such as ``'pensive_hopper_4f01c3'``.
        """

        with self.lock:
            adjective = self.rng.choice(adjectives)
            surname = self.rng.choice(surnames)
            suffix = self._hex(self.suffix_digits)

        return adjective + '_' + surname + '_' + suffix


    def uuid(self):
        """ Return a new random (version 4) :class:`uuid.UUID`. Setting the
            version bits guarantees the result is never the all-zeros UUID,
            which the protocol treats as unset.
        """

        with self.lock:
            bits = self.rng.getrandbits(128)

        return uuid.UUID(int=bits, version=4)


# end of class NameSource



_default = None
_default_lock = threading.Lock()


def default():
    """ Return the shared :class:`NameSource`, creating it on first use with
        the seed from :func:`ksample.config.seed`.
    """

    global _default

    with _default_lock:
        if _default is None:
            _default = NameSource(config.seed())

        return _default


def reset():
    """ Discard the shared :class:`NameSource`; the next call to
        :func:`default` creates a new one, re-reading the configured seed.
    """

    global _default

    with _default_lock:
        _default = None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
