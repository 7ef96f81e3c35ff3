"""Tests for visanav.history: in-memory history stack."""

from visanav.history import History, MemoryHistory


class TestMemoryHistory:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryHistory(), History)

    def test_push_appends(self) -> None:
        history = MemoryHistory("/")
        history.push_state("/news")
        assert history.pathname == "/news"
        assert history.length == 2

    def test_push_truncates_forward_stack(self) -> None:
        history = MemoryHistory("/")
        history.push_state("/a")
        history.push_state("/b")
        history.back()
        history.push_state("/c")
        assert history.entries == ("/", "/a", "/c")

    def test_push_does_not_fire_popstate(self) -> None:
        calls: list[str] = []
        history = MemoryHistory("/")
        history.add_popstate_listener(lambda: calls.append(history.pathname))
        history.push_state("/news")
        assert calls == []

    def test_back_and_forward_fire_popstate(self) -> None:
        calls: list[str] = []
        history = MemoryHistory("/")
        history.add_popstate_listener(lambda: calls.append(history.pathname))
        history.push_state("/news")
        history.back()
        history.forward()
        assert calls == ["/", "/news"]

    def test_out_of_range_is_ignored(self) -> None:
        calls: list[str] = []
        history = MemoryHistory("/")
        history.add_popstate_listener(lambda: calls.append(history.pathname))
        history.back()
        history.forward()
        history.go(0)
        assert calls == []
        assert history.pathname == "/"

    def test_go_jumps(self) -> None:
        history = MemoryHistory("/")
        for path in ("/a", "/b", "/c"):
            history.push_state(path)
        history.go(-3)
        assert history.pathname == "/"

    def test_listener_added_once(self) -> None:
        history = MemoryHistory()

        def listener() -> None:
            return None

        history.add_popstate_listener(listener)
        history.add_popstate_listener(listener)
        assert history.listener_count == 1
        history.remove_popstate_listener(listener)
        history.remove_popstate_listener(listener)
        assert history.listener_count == 0
