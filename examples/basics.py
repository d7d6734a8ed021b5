from valuebridge import ObservableValue, combine, listen, listen_to

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Defining an observable value")
print("-" * 100)
print()

# An ObservableValue holds one value and tells its listeners whenever it is assigned.
current_age = ObservableValue(30)
current_name = ObservableValue("Alice")

log_on_change = lambda name: print(f"Name changed to: {name}")

# listen() hands back a subscription you call to stop listening.
stop_logging = current_name.listen(log_on_change)
current_name("Smith")  # Call syntax assigns the value

stop_logging()
current_name("Bob")  # This will not print anything

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Updating with a function")
print("-" * 100)
print()

current_age.listen(lambda age: print(f"Age is now {age}"), fire_immediately=True)

# update() replaces the value with fn(current value). Calls chain.
current_age.update(lambda age: age + 1).update(lambda age: age * 2)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Combining observables")
print("-" * 100)
print()


# A merged listenable fires whenever any of its sources fires. It carries no value,
# so the listener reads what it needs from the sources.
def log_name_and_age_change():
    print(f"Name: {current_name.value}, Age: {current_age.value}")


current_name_and_age = current_name + current_age  # Same as combine(current_name, current_age)
current_name_and_age.add_listener(log_name_and_age_change)

current_name("Charlie")
current_age(31)

current_name_and_age.remove_listener(log_name_and_age_change)

# This should NOT print anymore
current_age(32)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Mirroring one observable into another")
print("-" * 100)
print()

display_name = ObservableValue("")
listen(display_name, lambda name: print(f"Display name: {name}"))

# Every change of current_name is copied into display_name.
stop_mirroring = listen_to(display_name, current_name, fire_immediately=True)
current_name("Dana")

stop_mirroring()
current_name("Eve")  # display_name stays "Dana"
print(f"Display name after detaching: {display_name.value}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Scoped subscriptions")
print("-" * 100)
print()

with current_age.listen(lambda age: print(f"Inside the block: {age}")):
    current_age(40)

current_age(41)  # Only the earlier fire_immediately listener prints

merged = combine(current_name, display_name)
merged.add_listener(lambda: print("Either name changed"))
display_name("Frank")
