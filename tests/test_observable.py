from voter_guide.core.observable import Channel, StateChannel

def test_channel_starts_silent():
    channel = Channel("test")
    received = []
    channel.subscribe(received.append)
    assert received == []
    assert channel.has_value is False

def test_channel_broadcasts_in_order():
    channel = Channel("test")
    first, second = [], []
    channel.subscribe(first.append)
    channel.subscribe(second.append)
    channel.emit(1)
    channel.emit(2)
    assert first == [1, 2]
    assert second == [1, 2]

def test_late_subscriber_gets_latest_only():
    channel = Channel("test")
    channel.emit("a")
    channel.emit("b")
    received = []
    channel.subscribe(received.append)
    assert received == ["b"]
    channel.emit("c")
    assert received == ["b", "c"]

def test_unsubscribe_stops_delivery():
    channel = Channel("test")
    received = []
    unsubscribe = channel.subscribe(received.append)
    channel.emit(1)
    unsubscribe()
    channel.emit(2)
    assert received == [1]
    assert channel.subscriber_count() == 0
    # Calling it twice is harmless
    unsubscribe()

def test_callback_can_unsubscribe_itself():
    channel = Channel("test")
    received = []
    holder = {}

    def once(value):
        received.append(value)
        holder["unsubscribe"]()

    holder["unsubscribe"] = channel.subscribe(once)
    channel.emit(1)
    channel.emit(2)
    assert received == [1]

def test_state_channel_replays_seed():
    state = StateChannel(0, name="counter")
    received = []
    state.subscribe(received.append)
    assert received == [0]
    state.set(5)
    assert state.get() == 5
    assert received == [0, 5]
