"""CHIP-8 stack operations."""

import jax.numpy as jnp
from chip8.errors import StackUnderflow
from chip8.state import StackState


def push(stack: StackState, address: jnp.ndarray) -> StackState:
    """Push address onto stack, doubling its storage when full."""
    data = stack.data
    if stack.pointer >= data.shape[0]:
        data = jnp.concatenate([data, jnp.zeros_like(data)])
    new_data = data.at[stack.pointer].set(jnp.astype(address, jnp.uint16))
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState, pc: int) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack."""
    if stack.pointer == 0:
        raise StackUnderflow(pc)
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
