import sys
import pathlib
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))
from library_system import LibrarySystem

lib = LibrarySystem()
print('\n--- 1. Add books (Dune, Emma, Dune) ---')
for title in ['Dune', 'Emma', 'Dune']:
    ok, msg = lib.add_book(title)
    print('Add:', ok, msg)

print('\n--- 2. Display all books ---')
for line in lib.list_books():
    print(line)

print('\n--- 3. Borrow request (Emma) ---')
print('Borrow:', lib.borrow_book('Emma'))

print('\n--- 4. Return book never borrowed (Dune) ---')
print('Return:', lib.return_book('Dune'))

print('\n--- 5. Remove book (Dune) ---')
print('Remove:', lib.remove_book('Dune'))

print('\n--- 6. Undo last operation ---')
print('Undo:', lib.undo())

print('\n--- 7. Process borrow queue (twice) ---')
print('Process:', lib.process_queue())
print('Process:', lib.process_queue())

print('\n--- 8. Inventory report ---')
print(lib.export_report_books().to_string(index=False))

print('\n--- 9. Shutdown ---')
for msg in lib.shutdown():
    print(msg)
