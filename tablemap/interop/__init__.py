from .frames import to_dataframe, from_dataframe, column_array
