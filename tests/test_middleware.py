"""Tests for apply_middleware."""

from pyredux import (
    Action,
    Store,
    apply_middleware,
    create_store,
)


def counter(state, action):
    if state is None:
        state = 0

    if action.type == "INC":
        return state + 1

    return state


def recorder(log, name):
    def middleware(api):
        def wrap(next_dispatch):
            def dispatch(action):
                log.append((name, "before", getattr(action, "type", "thunk")))
                result = next_dispatch(action)
                log.append((name, "after", getattr(action, "type", "thunk")))
                return result

            return dispatch

        return wrap

    return middleware


def thunk(api):
    def wrap(next_dispatch):
        def dispatch(action):
            if callable(action):
                return action(api.dispatch, api.get_state)

            return next_dispatch(action)

        return dispatch

    return wrap


class TestApplyMiddleware:
    """Tests for the middleware enhancer."""

    def test_returns_store(self):
        store = create_store(counter, apply_middleware())

        assert isinstance(store, Store)
        assert store.get_state() == 0

    def test_without_middleware_dispatch_is_raw(self):
        store = create_store(counter, None, apply_middleware())

        action = Action(type="INC")

        assert store.dispatch(action) is action
        assert store.get_state() == 1

    def test_middleware_run_in_order(self):
        log = []
        store = create_store(
            counter,
            apply_middleware(recorder(log, "first"), recorder(log, "second")),
        )

        store.dispatch(Action(type="INC"))

        assert log == [
            ("first", "before", "INC"),
            ("second", "before", "INC"),
            ("second", "after", "INC"),
            ("first", "after", "INC"),
        ]
        assert store.get_state() == 1

    def test_init_action_bypasses_middleware(self):
        log = []

        create_store(counter, apply_middleware(recorder(log, "only")))

        assert log == []

    def test_api_dispatch_goes_through_whole_chain(self):
        log = []
        store = create_store(
            counter,
            apply_middleware(recorder(log, "outer"), thunk),
        )

        def increment_twice(dispatch, get_state):
            dispatch(Action(type="INC"))
            dispatch(Action(type="INC"))
            return get_state()

        assert store.dispatch(increment_twice) == 2
        assert [entry for entry in log if entry[1] == "before"] == [
            ("outer", "before", "thunk"),
            ("outer", "before", "INC"),
            ("outer", "before", "INC"),
        ]

    def test_middleware_may_short_circuit(self):
        def block(api):
            def wrap(next_dispatch):
                def dispatch(action):
                    if action.type == "BLOCKED":
                        return "blocked"

                    return next_dispatch(action)

                return dispatch

            return wrap

        store = create_store(counter, apply_middleware(block))

        assert store.dispatch(Action(type="BLOCKED")) == "blocked"
        assert store.get_state() == 0

    def test_api_get_state_reads_store(self):
        seen = []

        def spy(api):
            def wrap(next_dispatch):
                def dispatch(action):
                    seen.append(api.get_state())
                    result = next_dispatch(action)
                    seen.append(api.get_state())
                    return result

                return dispatch

            return wrap

        store = create_store(counter, apply_middleware(spy))
        store.dispatch(Action(type="INC"))

        assert seen == [0, 1]

    def test_dispatch_during_construction_reaches_raw_store(self):
        log = []

        def eager(api):
            api.dispatch(Action(type="INC"))

            return lambda next_dispatch: next_dispatch

        store = create_store(
            counter,
            apply_middleware(recorder(log, "outer"), eager),
        )

        assert store.get_state() == 1
        assert log == []

    def test_store_methods_delegate(self):
        store = create_store(counter, apply_middleware(thunk))
        calls = []
        seen = []

        unsubscribe = store.subscribe(lambda: calls.append(store.get_state()))
        store.observable().subscribe({"next": seen.append})

        store.dispatch(Action(type="INC"))
        unsubscribe()

        store.replace_reducer(lambda state, action: counter(state, action) + 10)

        assert calls == [1]
        assert seen == [0, 1, 11]
        assert store.get_state() == 11

    def test_preloaded_state_passed_through(self):
        store = create_store(counter, 41, apply_middleware(thunk))

        store.dispatch(Action(type="INC"))

        assert store.get_state() == 42
