"""
Interface Segregation - violation

One fat MultiFunctionDevice interface forces every device to implement
print, scan, fax and copy. A basic printer and a basic scanner fill the
methods they cannot support with NotImplementedError, and callers only find
out at runtime.
"""


class MultiFunctionDevice:
    def print_document(self, document):
        raise NotImplementedError("print_document() must be implemented")

    def scan(self):
        raise NotImplementedError("scan() must be implemented")

    def fax(self, document):
        raise NotImplementedError("fax() must be implemented")

    def copy(self):
        raise NotImplementedError("copy() must be implemented")


class BasicPrinter(MultiFunctionDevice):
    def print_document(self, document):
        print(f"Printing document: {document}")

    def scan(self):
        raise NotImplementedError("Scanning not supported on BasicPrinter")

    def fax(self, document):
        raise NotImplementedError("Faxing not supported on BasicPrinter")

    def copy(self):
        raise NotImplementedError("Copying not supported on BasicPrinter")


class BasicScanner(MultiFunctionDevice):
    def print_document(self, document):
        raise NotImplementedError("Printing not supported on BasicScanner")

    def scan(self):
        print("Scanning document...")
        return "Scanned content"

    def fax(self, document):
        raise NotImplementedError("Faxing not supported on BasicScanner")

    def copy(self):
        raise NotImplementedError("Copying not supported on BasicScanner")


class ProfessionalAllInOne(MultiFunctionDevice):
    def print_document(self, document):
        print(f"Printing document: {document}")

    def scan(self):
        print("Scanning document...")
        return "Scanned content"

    def fax(self, document):
        print(f"Faxing document: {document}")

    def copy(self):
        print("Copying document...")
        self.print_document(self.scan())


def archive_paperwork(device):
    # typed as the whole device, so nothing stops a printer being passed in
    return f"archived: {device.scan()}"


def main():
    printer = BasicPrinter()
    printer.print_document("Annual Report")
    try:
        print(archive_paperwork(printer))
    except NotImplementedError as e:
        print(f"Error: {e}")

    scanner = BasicScanner()
    print(f"Scanned content: {scanner.scan()}")
    try:
        scanner.print_document("Document")
    except NotImplementedError as e:
        print(f"Error: {e}")

    all_in_one = ProfessionalAllInOne()
    all_in_one.fax("Contract")
    all_in_one.copy()


if __name__ == "__main__":
    main()
