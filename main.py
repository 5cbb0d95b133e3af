# -*- coding: utf-8 -*-
"""
main.py

Console demo of the gazette review backend.

🎯 What it does
--------------------------------------
1. Reads a Diário Oficial PDF from disk (argument or prompt)
2. Same upload checks as the API (type / size)
3. atos.run_analysis: AI extraction + grouping by organization
4. Prints the summary and the groups in review order
   (▼ = opens automatically in the UI, ▶ = collapsed)

Usage:
    python main.py diario.pdf
    python main.py diario.pdf --json
"""

import json
import sys
from pathlib import Path

from atos import run_analysis
from atos.builders import build_analysis_view
from atos.errors import ExtractionError, to_user_message
from services.intake import PDF_MIME, encode_base64, read_upload, validate_pdf_upload


def print_result(view) -> None:
    print("\n[Destaques do Documento]")
    print(" ", view["summary"])
    print(f"\n[Atos por Secretaria] {view['total_acts']} registros encontrados")

    if not view["groups"]:
        print("  Nenhum ato de pessoal relevante encontrado neste documento.")
        return

    for group in view["groups"]:
        marker = "▼" if group["auto_expand"] else "▶"
        print(f"\n{marker} {group['name']} ({group['count']})")
        if not group["auto_expand"]:
            continue
        for act in group["acts"]:
            role = f" - {act['role']}" if act.get("role") else ""
            print(f"   [{act['typeLabel']}] {act['displayName']}{role}")
            print(f"       {act['description']}")


def run_file(path: Path, as_json: bool = False) -> int:
    if not path.exists():
        print(f"Arquivo não encontrado: {path}")
        return 1

    with path.open("rb") as f:
        data = read_upload(f)
    content_type = PDF_MIME if path.suffix.lower() == ".pdf" else ""

    print(f"Processando Diário Oficial... ({path.name})")
    print("Isso pode levar até 2 minutos dependendo do tamanho do arquivo.")

    try:
        validate_pdf_upload(path.name, content_type, data)
        result = run_analysis(encode_base64(data), file_name=path.name)
    except ExtractionError as e:
        print(f"⚠️ {to_user_message(e)}")
        return 1

    view = build_analysis_view(result.response, result.groups)
    if as_json:
        print(json.dumps(view, ensure_ascii=False, indent=2))
    else:
        print_result(view)
    return 0


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    as_json = "--json" in sys.argv[1:]

    if args:
        file_arg = args[0]
    else:
        try:
            file_arg = input("PDF > ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nEncerrando.")
            sys.exit(0)

    sys.exit(run_file(Path(file_arg), as_json=as_json))
