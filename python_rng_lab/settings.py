from enums import GeneratorType, GENERATOR_NAMES


class Settings:
    def __init__(self):
        self._i_samples_cnt = 100
        self._i_intervals_cnt = 10
        self._generator_type = GeneratorType.LINEAR
        self._b_show_values = True
        self._b_plot = False
        self._s_plot_save_path = None
        self._i_seed = None

    def set_samples_cnt(self, i_samples_cnt):
        self._i_samples_cnt = i_samples_cnt

    def get_samples_cnt(self):
        return self._i_samples_cnt

    def set_intervals_cnt(self, i_intervals_cnt):
        self._i_intervals_cnt = i_intervals_cnt

    def get_intervals_cnt(self):
        return self._i_intervals_cnt

    def set_generator_type(self, e_generator_type):
        self._generator_type = e_generator_type

    def get_generator_type(self):
        return self._generator_type

    def set_show_values(self, b_show_values):
        self._b_show_values = b_show_values

    def is_show_values(self):
        return self._b_show_values

    def set_plot(self, b_plot):
        self._b_plot = b_plot

    def is_plot(self):
        return self._b_plot

    def set_plot_save_path(self, s_path):
        self._s_plot_save_path = s_path

    def get_plot_save_path(self):
        return self._s_plot_save_path

    def set_seed(self, i_seed):
        self._i_seed = i_seed

    def get_seed(self):
        return self._i_seed

    def get_generator_type_name(self):
        return GENERATOR_NAMES.get(self._generator_type, "Unknown")

    def print(self):
        print(f"Generator: {self.get_generator_type_name()}")
        print(f"Sample count: {self._i_samples_cnt}")
        print(f"Histogram intervals: {self._i_intervals_cnt}")
        if self._i_seed is None:
            print("Seed: wall clock")
        else:
            print(f"Seed: {self._i_seed}")
