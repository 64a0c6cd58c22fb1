"""
Interface Segregation - correct implementation

Each capability is its own small abstract base class. A basic printer
implements Printable and nothing else, a combo device mixes in the three it
supports, and client code asks for the single capability it needs. An
OfficeStation is composed from optional parts and reports a missing one
instead of calling a method that can only fail.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Printable(ABC):
    @abstractmethod
    def print_document(self, document: str) -> None: ...


class Scannable(ABC):
    @abstractmethod
    def scan(self) -> str: ...


class Faxable(ABC):
    @abstractmethod
    def fax(self, document: str) -> None: ...


class Copyable(Printable, Scannable):
    def copy(self) -> None:
        print(f"[{type(self).__name__}] Copying document...")
        self.print_document(self.scan())


class SimplePrinter(Printable):
    def print_document(self, document):
        print(f"Printing document: {document}")


class SimpleScanner(Scannable):
    def scan(self):
        print("Scanning document...")
        return "Scanned content"


class SimpleFaxMachine(Faxable):
    def fax(self, document):
        print(f"Faxing document: {document}")


class PrinterScannerCombo(Copyable):
    def print_document(self, document):
        print(f"[Combo] Printing document: {document}")

    def scan(self):
        print("[Combo] Scanning document...")
        return "Scanned content from combo device"


class MultifunctionDevice(Copyable, Faxable):
    def print_document(self, document):
        print(f"[Multifunction] Printing document: {document}")

    def scan(self):
        print("[Multifunction] Scanning document...")
        return "Scanned content from multifunction device"

    def fax(self, document):
        print(f"[Multifunction] Faxing document: {document}")


def archive_paperwork(scanner: Scannable) -> str:
    """Needs nothing but scanning, so any Scannable will do."""
    return f"archived: {scanner.scan()}"


class OfficeStation:
    def __init__(self, printer: Optional[Printable] = None, scanner: Optional[Scannable] = None,
                 fax_machine: Optional[Faxable] = None):
        self.printer = printer
        self.scanner = scanner
        self.fax_machine = fax_machine

    def print_document(self, document: str) -> None:
        if self.printer is None:
            print("Printing not supported")
            return
        self.printer.print_document(document)

    def scan(self) -> Optional[str]:
        if self.scanner is None:
            print("Scanning not supported")
            return None
        return self.scanner.scan()

    def fax(self, document: str) -> None:
        if self.fax_machine is None:
            print("Faxing not supported")
            return
        self.fax_machine.fax(document)


def main():
    print("1. Single-capability devices:")
    SimplePrinter().print_document("Annual Report")
    print(f"Result: {SimpleScanner().scan()}")
    SimpleFaxMachine().fax("Contract")

    print("\n2. Multifunction device:")
    device = MultifunctionDevice()
    device.print_document("Meeting Notes")
    device.fax("Important Document")
    device.copy()

    print("\n3. Printer/scanner combo without fax:")
    combo = PrinterScannerCombo()
    combo.copy()
    print(f"Combo can fax: {isinstance(combo, Faxable)}")

    print("\n4. Clients depend on one capability:")
    print(archive_paperwork(SimpleScanner()))
    print(archive_paperwork(combo))

    print("\n5. Office station without a fax machine:")
    station = OfficeStation(SimplePrinter(), SimpleScanner())
    station.print_document("Invoice")
    station.scan()
    station.fax("Document")


if __name__ == "__main__":
    main()
