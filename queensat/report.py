import logging
import os
from datetime import datetime
from zipfile import BadZipFile

import pandas as pd
from openpyxl import Workbook
from openpyxl import load_workbook
from openpyxl.utils.dataframe import dataframe_to_rows

logger = logging.getLogger(__name__)

RESULTS_SHEET = "Results"
id_counter = 0


def results_file_path(output_path):
    current_date = datetime.now().strftime('%Y-%m-%d')
    return os.path.join(output_path, f"results_{current_date}.xlsx")


def open_results_book(excel_file_path):
    # today's workbook with a Results sheet, a fresh one when missing or unreadable
    book = None
    if os.path.exists(excel_file_path):
        try:
            book = load_workbook(excel_file_path)
        except BadZipFile:
            logger.warning("%s is not a valid workbook, starting a new one", excel_file_path)

    if book is None:
        book = Workbook()
        book.active.title = RESULTS_SHEET
    elif RESULTS_SHEET not in book.sheetnames:
        book.create_sheet(RESULTS_SHEET)
    return book


def write_to_xlsx(result_dict, output_path):
    os.makedirs(output_path, exist_ok=True)
    excel_file_path = results_file_path(output_path)

    book = open_results_book(excel_file_path)
    sheet = book[RESULTS_SHEET]
    records = pd.DataFrame([result_dict])
    for row in dataframe_to_rows(records, index=False, header=False):
        sheet.append(row)
    book.save(excel_file_path)

    logger.info("wrote result %s to %s", result_dict.get("No"), excel_file_path)
    return excel_file_path


def export_result(result, output_path, solver_name):
    global id_counter
    id_counter += 1
    result_dict = {
        "No": id_counter,
        "Problem": f"{result['size']}x{result['size']}",
        "Type": solver_name,
        "Time": result["time"],
        "Result": result["result"],
        "Variables": result["variables"],
        "Clauses": result["clauses"],
    }
    return write_to_xlsx(result_dict, output_path)
