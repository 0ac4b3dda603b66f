import dxfcodec


def main() -> None:
    doc = dxfcodec.read("examples/data/sample_r2000.dxf")
    print(f"read {len(doc.entities)} entities ({doc.version.name})")
    for diagnostic in doc.diagnostics:
        print("diagnostic:", diagnostic)

    written = doc.write("/tmp/sample_r12.dxf", version="R12")
    print(f"written: {written} records to /tmp/sample_r12.dxf")


if __name__ == "__main__":
    main()
