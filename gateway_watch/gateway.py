import logging
import typing as typ

import bs4 # type: ignore
import requests

from .errors import LoginError


logger = logging.getLogger(__name__)

LOGIN_PATH = '/check.jst'
STATUS_PATH = '/network_setup.jst'
BAD_LOGIN_MARKER = 'alert("Incorrect '
LOGGED_OUT_MARKER = 'alert("Please Login First!");'


class Gateway:
    def __init__(self, addr: str, username: str, password: str,
                 timeout: float = 10.0,
                 session: typ.Optional[requests.Session] = None) -> None:
        self.addr = addr.rstrip('/')
        self.username = username
        self.password = password
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def login(self) -> None:
        logger.info('Logging in to %s as %s', self.addr, self.username)
        with self.session.post(self.addr + LOGIN_PATH,
                               data={'username': self.username,
                                     'password': self.password},
                               timeout=self.timeout) as res:
            res.raise_for_status()
            body = res.text
        if BAD_LOGIN_MARKER in body:
            raise LoginError('Incorrect user name or password')

    def fetch_status(self) -> typ.Optional[bs4.BeautifulSoup]:
        """Fetch and parse the status page, or log in again and return None
        if the session has expired."""
        with self.session.get(self.addr + STATUS_PATH, timeout=self.timeout) as res:
            res.raise_for_status()
            body = res.text
        if LOGGED_OUT_MARKER in body:
            logger.warning('Session expired, logging in again')
            self.login()
            return None
        return bs4.BeautifulSoup(body, 'html.parser')

    def close(self) -> None:
        self.session.close()
