from pyprop.Gen import choose, list_of_n
from pyprop.Prop import for_all
from pyprop.RNG import SimpleRNG


class TimeListOfN:
    def setup(self):
        self.rng = SimpleRNG(42)
        self.small = list_of_n(1000, choose(0, 100))
        self.medium = list_of_n(10000, choose(0, 100))
        self.large = list_of_n(100000, choose(0, 100))

    def time_list_of_n_small(self):
        self.small.run(self.rng)

    def time_list_of_n_medium(self):
        self.medium.run(self.rng)

    def time_list_of_n_large(self):
        self.large.run(self.rng)


class TimeForAll:
    def setup(self):
        self.rng = SimpleRNG(42)
        self.prop = for_all(choose(0, 100), lambda x: 0 <= x < 100)

    def time_for_all_1000_cases(self):
        self.prop.run(1000, self.rng)
