# app/api/hello.py

from typing import Callable, List, Tuple

from app.services.greeting import GreetingProvider

Route = Tuple[str, str, Callable[[], str]]


class GreetingEndpoint:
    def __init__(self, provider: GreetingProvider) -> None:
        self.provider = provider

    def hello(self) -> str:
        """
        Return the provider's greeting as the plain-text response body.
        """
        return self.provider.say_hello()

    def routes(self) -> List[Route]:
        # (path, method, handler)
        return [
            ("/hello", "GET", self.hello),
        ]
