# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for matrix storage and result reporting.

External dependencies (h5py, json, stdout) are confined to this layer.
"""
from powermethod.adapters.hdf5_io import (
    DEFAULT_DATASET_PATH,
    Hdf5MatrixSource,
    Hdf5MatrixWriter,
)
from powermethod.adapters.json_reporter import JsonResultReporter, result_to_dict
from powermethod.adapters.text_reporter import TextResultReporter
