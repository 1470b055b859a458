import os
import time
import random
import tqdm

import enigma_config

n_messages = 3000
chars_per_message = 256

machine = enigma_config.read_config(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'default.conf'))
charset = str(machine.alphabet)
setup = '* B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)'

messages = [''.join(random.choices(charset, k=chars_per_message)) for _ in range(n_messages)]
tick = time.time()
for message in tqdm.tqdm(messages):
    enigma_config.setup_machine(machine, setup)
    encoded_message = machine.convert_message(message)
tock = time.time()

avg_time = (tock-tick)/n_messages

print(f'Average encoding time for message with {chars_per_message} characters: {avg_time:.2e} seconds')
